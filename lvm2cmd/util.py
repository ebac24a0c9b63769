# util.py
# Helpers for running external programs.
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

import os
import subprocess
import sys

from .flags import flags

import logging
log = logging.getLogger("lvm2cmd")
program_log = logging.getLogger("program")


def _log_output(label, data):
    if not data:
        return

    program_log.info("%s:", label)
    for line in data.decode("utf-8", errors="replace").splitlines():
        program_log.info("%s", line)


def _run_program(argv, stdin=None, env_prune=None):
    """ Run argv and return its return code, stdout and stderr as bytes.

        :param argv: the program and its arguments
        :type argv: list of str
        :keyword env_prune: environment variables to remove before running
        :type env_prune: list of str
        :raises: OSError if the program could not be started
    """
    if env_prune is None:
        env_prune = []

    program_log.info("Running... %s", " ".join(argv))

    env = os.environ.copy()
    env.update({"LC_ALL": "C"})
    for var in env_prune:
        env.pop(var, None)

    try:
        proc = subprocess.Popen(argv,
                                stdin=stdin,
                                stdout=subprocess.PIPE,
                                stderr=subprocess.PIPE,
                                close_fds=True,
                                env=env)

        out, err = proc.communicate()
        _log_output("stdout", out)
        _log_output("stderr", err)
    except OSError as e:
        program_log.error("Error running %s: %s", argv[0], e.strerror)
        raise

    program_log.debug("Return code: %d", proc.returncode)

    return (proc.returncode, out, err)


def run_program_and_capture_output_binary(*args, **kwargs):
    return _run_program(*args, **kwargs)


def set_up_logging(log_dir="/tmp", log_prefix="lvm2cmd", console=False):
    """ Configure the package loggers to write out a log file.

        Meant for applications and scripts; the library itself never
        installs handlers other than a NullHandler.

        :keyword str log_dir: path to directory where log files are
        :keyword str log_prefix: prefix for log file names
        :keyword bool console: also log to stderr
        :returns: the path of the log file
        :rtype: str
    """
    level = logging.DEBUG if flags.debug else logging.INFO
    log.setLevel(logging.DEBUG)
    program_log.setLevel(logging.DEBUG)

    log_file = os.path.realpath("%s/%s.log" % (log_dir, log_prefix))
    handler = logging.FileHandler(log_file)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    log.addHandler(handler)
    program_log.addHandler(handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        log.addHandler(console_handler)

    log.info("sys.argv = %s", sys.argv)
    return log_file
