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

GCP_PROJECT_ID = os.getenv('GCP_PROJECT_ID')
GCP_REGION = os.getenv('GCP_REGION')
GCP_CREDENTIALS_PATH = os.getenv('GCP_CREDENTIALS_PATH')

GCP_OPERATION_TIMEOUT = int(os.getenv('GCP_OPERATION_TIMEOUT', 300))

# VXLAN tunnel and metrics ports
DEFAULT_INTERNAL_PORTS = '4800/udp,8080/tcp'
INTERNAL_PORTS = os.getenv('INTERNAL_PORTS') or DEFAULT_INTERNAL_PORTS
