# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

import re
from pathlib import Path

from platformdirs import user_config_dir, user_log_path

APP_NAME = "svnharvest"
ENV_APP_PREFIX = APP_NAME.upper() + "_"
LOG_DIR = Path(user_log_path(appname=APP_NAME))

CONFIG_FILENAME = "svnharvestconfig.toml"

GLOBAL_CONFIG_FILE = Path(user_config_dir(APP_NAME)) / CONFIG_FILENAME
LOCAL_CONFIG_FILE = Path(CONFIG_FILENAME)

SUPPORTED_VCS = "svn"

# placeholders for data the svn output does not provide
NO_ID = "<no_id>"
NO_DATE = "<no_date>"
NO_PATH = "<no_path>"

# first line of every changed artifact in `svn diff` output
ARTIFACT_START_MARKER = "Index:"

# revision tokens look like "r78"
REVISION_PREFIX = "r"
REVISION_PATTERN = re.compile(r"r\d+")

# line that ends a commit given to the parse command
TERMINATION_TOKEN = "!q!"

DEFAULT_MAX_ATTEMPTS = 1
DEFAULT_QUEUE_CAPACITY = 10
