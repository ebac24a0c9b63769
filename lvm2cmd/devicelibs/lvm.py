#
# lvm.py
# lvm report constants
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

# every command is asked for a JSON report
REPORT_FORMAT_ARGS = ["--reportformat", "json"]

# lvm exits with this code when the requested object does not exist
ECMD_NOT_FOUND = 5

LV_REPORT_KEY = "lv"
VG_REPORT_KEY = "vg"

# deterministic ordering for listings
LV_SORT_KEY = "vg_name,lv_name"
VG_SORT_KEY = "vg_name"


def report_args(fields, nolocking=True, extra=None, sort=None):
    """ Arguments shared by all lvs/vgs queries.

        Sizes are requested in bytes without a unit suffix so that they can
        be parsed as integers.

        :param str fields: the --options value, e.g. '+lv_all'
        :param bool nolocking: whether to skip taking the metadata locks
        :param extra: arguments appended after the common ones
        :type extra: list of str
        :param str sort: the --sort value, None for the tool's order
        :rtype: list of str
    """
    args = []
    if nolocking:
        args.append("--nolocking")

    args.extend(["--options", fields, "--units", "b", "--nosuffix"])
    if sort:
        args.extend(["--sort", sort])
    if extra:
        args.extend(extra)

    return args


def lv_report_args(nolocking=True, extra=None, sort=None):
    return report_args("+lv_all", nolocking=nolocking, extra=extra, sort=sort)


def vg_report_args(nolocking=True, extra=None, sort=None):
    return report_args("+vg_all", nolocking=nolocking, extra=extra, sort=sort)


def uuid_selector(uuid):
    return ["--select", "uuid=%s" % uuid]


def activation_arg(activate):
    """ Value of --activate: 'ay' (autoactivate) or 'n'. """
    return "ay" if activate else "n"
