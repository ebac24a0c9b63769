# executor.py
# Running lvm commands and decoding their JSON reports.
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

import errno
import json

from . import util
from .availability import LVM_APP
from .devicelibs.lvm import REPORT_FORMAT_ARGS, ECMD_NOT_FOUND
from .errors import LVMError, LVMCommandError, LVMInternalError, MalformedOutputError
from .errors import ResourceNotFoundError
from .flags import flags

import logging
log = logging.getLogger("lvm2cmd")

# exceptions a record constructor raises for data it cannot use
RECORD_ERRORS = (LVMError, ValueError, TypeError, KeyError)


def unwrap_report(text, key):
    """ Return the array stored under report[0][key] of a JSON report.

        :param str text: the JSON document printed by lvm
        :param str key: the unwrap key, e.g. 'lv' or 'vg'
        :rtype: list
        :raises: :class:`~.errors.MalformedOutputError`

        Only the first report block is consulted.
    """
    try:
        document = json.loads(text)
    except ValueError as e:
        raise MalformedOutputError("could not decode JSON output", str(e)) from e

    try:
        wrapped = document["report"][0][key]
    except (KeyError, IndexError, TypeError):
        raise MalformedOutputError("wrapping is in the wrong format",
                                   'expected { "report": [ { "%s": ... } ] }' % key) from None

    if not isinstance(wrapped, list):
        raise MalformedOutputError("wrapped value is not an array", "expecting [ ... ]")

    return wrapped


def _fragment(item):
    try:
        return json.dumps(item, sort_keys=True)
    except (TypeError, ValueError):
        return repr(item)


def decode_records(items, record):
    """ Build one record per item, failing on the first one that does not fit.

        :param items: values taken from a report
        :param record: callable taking one item and returning a record
        :rtype: list
        :raises: :class:`~.errors.MalformedOutputError`
    """
    records = []
    for item in items:
        try:
            records.append(record(item))
        except RECORD_ERRORS as e:
            raise MalformedOutputError("could not decode wrapped value",
                                       "%s in %s" % (e, _fragment(item))) from e

    return records


class LVMExecutor(object):

    """ Runs lvm subcommands.

        All configuration is resolved when the executor is created: the
        path of the lvm binary, whether report queries skip locking and
        which environment variables are dropped before running lvm.
        Values not passed explicitly are taken from :data:`~.flags.flags`.
    """

    def __init__(self, lvm_binary=None, nolocking=None, env_prune=None):
        """
            :keyword str lvm_binary: path of the lvm binary
            :keyword bool nolocking: pass --nolocking to report queries
            :keyword env_prune: environment variables to remove
            :type env_prune: list of str
            :raises: :class:`~.errors.LVMInternalError` if lvm cannot be found
        """
        if lvm_binary is None:
            lvm_binary = flags.lvm_binary
        if lvm_binary is None:
            lvm_binary = LVM_APP.path
        if lvm_binary is None:
            msg = "; ".join(LVM_APP.availability_errors)
            raise LVMInternalError(FileNotFoundError(errno.ENOENT, msg, LVM_APP.name))

        self.lvm_binary = lvm_binary
        self.nolocking = flags.nolocking if nolocking is None else nolocking
        self.env_prune = list(flags.env_prune if env_prune is None else env_prune)

    def __repr__(self):
        return "LVMExecutor(lvm_binary=%r, nolocking=%r)" % (self.lvm_binary, self.nolocking)

    def _argv(self, cmd, args):
        return [self.lvm_binary, cmd] + REPORT_FORMAT_ARGS + [str(arg) for arg in args]

    def _execute(self, cmd, args):
        """ Run the command and return its stdout as text. """
        argv = self._argv(cmd, args)
        log.debug("running lvm %s with args %s", cmd, argv[2:])

        try:
            rc, out, err = util.run_program_and_capture_output_binary(argv, env_prune=self.env_prune)
        except OSError as e:
            raise LVMInternalError(e) from e

        if rc == ECMD_NOT_FOUND:
            raise ResourceNotFoundError(argv[-1])
        elif rc != 0:
            message = err.decode("utf-8", errors="replace").strip()
            raise LVMCommandError(cmd, argv[1:], message)

        try:
            text = out.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedOutputError("could not decode command output from UTF-8", str(e)) from e

        log.debug("command executed with: %s", text)
        return text

    def run(self, cmd, args, unwrap_key=None, record=str):
        """ Run an lvm subcommand and decode its output.

            :param str cmd: the subcommand, e.g. 'lvs'
            :param args: arguments following the report format arguments
            :type args: list of str
            :keyword str unwrap_key: name of the report array to decode;
                                     without it the whole output is one item
            :keyword record: callable building a record from one item
            :returns: the records in the order lvm reported them
            :rtype: list
        """
        text = self._execute(cmd, args)

        if unwrap_key is None:
            items = [text]
        else:
            items = unwrap_report(text, unwrap_key)
            log.debug("got unwrapped output: %s", items)

        records = decode_records(items, record)
        log.debug("got mapped answer: %s", records)
        return records

    def report(self, cmd, args, unwrap_key, record):
        """ Run a report query and return the decoded records. """
        if not unwrap_key:
            raise ValueError("report queries need an unwrap key")

        return self.run(cmd, args, unwrap_key=unwrap_key, record=record)

    def mutate(self, cmd, args):
        """ Run a command whose success is signalled by its exit code only. """
        self.run(cmd, args)
