# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Topaz CLI invocation constants."""

CODE_PAGE_PARM = "-code"
DATA_PARM = "-data"
FILE_EXT_PARM = "-ext"
FILTER_PARM = "-filter"
HOST_PARM = "-host"
PASSWORD_PARM = "-pass"
PORT_PARM = "-port"
SCM_TYPE_PARM = "-scm"
USERID_PARM = "-id"
TARGET_FOLDER_PARM = "-targetFolder"

COMMA = ","
DOUBLE_QUOTE = '"'
DOUBLE_QUOTE_ESCAPED = '""'

ENDEVOR = "endevor"

TOPAZ_CLI_BAT = "TopazCLI.bat"
TOPAZ_CLI_SH = "TopazCLI.sh"
TOPAZ_CLI_WORKSPACE = "TopazCliWkspc"

PASSWORD_MASK = "********"
