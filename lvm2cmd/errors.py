# errors.py
# Exception classes for the lvm2cmd package.
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


class LVMError(Exception):
    """ Base class for everything raised by this package. """


class LVMCommandError(LVMError):

    """ The lvm command ran but exited with a failure status. """

    def __init__(self, command, args, message):
        self.command = command
        self.arguments = list(args)
        self.message = message
        super(LVMCommandError, self).__init__("could not run `%s` with args `%s`: %s"
                                              % (command, self.arguments, message))


class LVMInternalError(LVMError):

    """ The lvm command could not be run at all. """

    def __init__(self, io):
        self.io = io
        super(LVMInternalError, self).__init__("could not run lvm command: %s" % io)


class MalformedOutputError(LVMError):

    """ The output of the lvm command does not have the expected shape. """

    def __init__(self, cause, result):
        self.cause = cause
        self.result = result
        super(MalformedOutputError, self).__init__("output of lvm command is malformed: %s -> %s"
                                                   % (cause, result))


class ResourceNotFoundError(LVMError):

    def __init__(self, resource):
        self.resource = str(resource)
        super(ResourceNotFoundError, self).__init__("requested resource not found: %s" % self.resource)

# value objects


class InvalidResourceError(LVMError, ValueError):

    rule = ""

    def __init__(self, value):
        self.value = value
        super(InvalidResourceError, self).__init__("%s: %s" % (self.rule, value))


class InvalidResourceNameError(InvalidResourceError):
    rule = "name must be valid for LVM2 ([a-zA-Z0-9_.+-])"


class InvalidResourceUUIDError(InvalidResourceError):
    rule = "UUID must be valid for LVM2 (^[a-zA-Z0-9]{6}-([a-zA-Z0-9]{4}-){5}[a-zA-Z0-9]{6}$)"


class InvalidResourceCapacityError(InvalidResourceError):
    rule = "capacity must be valid for LVM2 (non-negative multiple of 512)"

# attribute strings


class AttributeDecodeError(LVMError, ValueError):

    """ An attribute string could not be decoded.

        :attr field: the attribute field that failed
        :attr char: the offending character, None if the string was too short
    """

    def __init__(self, field, char=None):
        self.field = field
        self.char = char
        if char is None:
            msg = "could not get %s attribute" % field
        else:
            msg = "invalid flag for %s: %r" % (field, char)
        super(AttributeDecodeError, self).__init__(msg)
