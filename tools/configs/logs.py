#   -*- coding: utf-8 -*-
#
#   This file is part of cloud-prepare
#
#   Copyright (C) 2021 SKALE Labs
#
#   This program is free software: you can redistribute it and/or modify
#   it under the terms of the GNU Affero General Public License as published by
#   the Free Software Foundation, either version 3 of the License, or
#   (at your option) any later version.
#
#   This program is distributed in the hope that it will be useful,
#   but WITHOUT ANY WARRANTY; without even the implied warranty of
#   MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#   GNU Affero General Public License for more details.
#
#   You should have received a copy of the GNU Affero General Public License
#   along with this program.  If not, see <https://www.gnu.org/licenses/>.

import os
from tools.configs import DATA_PATH

LOG_FOLDER_NAME = 'log'
LOG_FOLDER = os.getenv('LOG_FOLDER') or os.path.join(DATA_PATH, LOG_FOLDER_NAME)

PREPARE_LOG_FILENAME = 'prepare.log'
PREPARE_LOG_PATH = os.path.join(LOG_FOLDER, PREPARE_LOG_FILENAME)

DEBUG_LOG_FILENAME = 'debug.log'
DEBUG_LOG_PATH = os.path.join(LOG_FOLDER, DEBUG_LOG_FILENAME)

LOG_FILE_SIZE_MB = 10
LOG_FILE_SIZE_BYTES = LOG_FILE_SIZE_MB * 1000000

LOG_BACKUP_COUNT = 5

PREPARE_LOG_FORMAT = '[%(asctime)s %(levelname)s][%(process)d][%(threadName)s] - %(name)s:%(lineno)d - %(message)s'  # noqa
