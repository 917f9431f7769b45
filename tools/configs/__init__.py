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

DATA_PATH = os.getenv('DATA_PATH', '/var/lib/cloud-prepare')

LOCK_FILENAME = 'prepare.lock'
PREPARE_LOCK_PATH = os.getenv('PREPARE_LOCK_PATH') or \
    os.path.join(DATA_PATH, LOCK_FILENAME)

INFRA_ID = os.getenv('INFRA_ID')
