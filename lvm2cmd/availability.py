# availability.py
# Lookup of the external programs this package runs.
#
# Copyright (C) 2026  Red Hat, Inc.
#
# This copyrighted material is made available to anyone wishing to use,
# modify, copy, or redistribute it subject to the terms and conditions of
# the GNU General Public License v.2, or (at your option) any later version.
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY expressed or implied, including the implied warranties of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General
# Public License for more details.  You should have received a copy of the
# GNU General Public License along with this program; if not, write to the
# Free Software Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA
# 02110-1301, USA.  Any Red Hat trademarks that are incorporated in the
# source code or documentation are not subject to the GNU General Public
# License and may only be used or replicated with the express permission of
# Red Hat, Inc.
#

import abc
import os
import shutil

import logging
log = logging.getLogger("lvm2cmd")

CACHE_AVAILABILITY = True


class ExternalResource(object):

    """ An external program. """

    def __init__(self, method, name):
        """ Initializes an instance of an external resource.

            :param method: A method object
            :type method: :class:`Method`
            :param str name: the name of the external program
        """
        self._method = method
        self.name = name
        self._path = None
        self._cache_key = None

    def __str__(self):
        return self.name

    @property
    def path(self):
        """ Absolute path of the program, None if it cannot be found.

            A cached path is reused only while the method's
            :meth:`~Method.cache_key` stays the same.
        """
        key = self._method.cache_key()
        if self._path is not None and CACHE_AVAILABILITY and key == self._cache_key:
            return self._path

        path = self._method.locate(self)
        if CACHE_AVAILABILITY:
            self._path = path
            self._cache_key = key
        return path

    @property
    def availability_errors(self):
        """ Reasons why the program is unavailable.

            :returns: [] if the resource is available
            :rtype: list of str
        """
        if self.path is None:
            return [self._method.missing_message(self)]
        return []

    @property
    def available(self):
        return self.availability_errors == []


class Method(object, metaclass=abc.ABCMeta):

    """ Method for locating an external program. """

    @abc.abstractmethod
    def locate(self, resource):
        """ Returns the path of the resource or None.

            :param resource: any external resource
            :type resource: :class:`ExternalResource`
        """
        raise NotImplementedError()

    def cache_key(self):
        """ Whatever the result of :meth:`locate` depends on besides $PATH. """
        return None

    def missing_message(self, resource):
        return "application %s is not in $PATH" % resource.name


class Path(Method):

    """ Methods for when the program is found in $PATH. """

    def locate(self, resource):
        return shutil.which(resource.name)


Path = Path()


class EnvironmentPath(Method):

    """ The program is named by an environment variable, falling back to $PATH.

        A variable that is set but names no executable is not an invitation
        to look in $PATH; the program is then missing.
    """

    def __init__(self, variable):
        self.variable = variable

    def cache_key(self):
        return os.environ.get(self.variable) or None

    def locate(self, resource):
        value = os.environ.get(self.variable)
        if value:
            log.debug("%s taken from $%s: %s", resource.name, self.variable, value)
            path = shutil.which(value)
            if path is None:
                log.warning("$%s names %s, which is not an executable", self.variable, value)
            return path

        return Path.locate(resource)

    def missing_message(self, resource):
        value = os.environ.get(self.variable)
        if value:
            return "application %s named by $%s is not an executable: %s" % (resource.name, self.variable, value)
        return "application %s is neither named by $%s nor in $PATH" % (resource.name, self.variable)


def application_from_env(name, variable):
    """ Construct an application that $variable may point somewhere else. """
    return ExternalResource(EnvironmentPath(variable), name)


LVM_APP = application_from_env("lvm", "LVM_BINARY")
