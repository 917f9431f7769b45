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

import logging
import os
import sys
from typing import List, Optional

from filelock import FileLock

from core.cloud.reporter import get_default_reporter
from core.cloud.types import ICloud, IReporter, PrepareInput
from core.cloud.gcp.utils import get_default_cloud, get_default_internal_ports

from tools.configs import PREPARE_LOCK_PATH
from tools.logger import init_prepare_logger


logger = logging.getLogger(__name__)

PREPARE_ACTION = 'prepare'
CLEANUP_ACTION = 'cleanup'
ACTIONS = (PREPARE_ACTION, CLEANUP_ACTION)


def prepare(cloud: ICloud, reporter: IReporter) -> None:
    prepare_input = PrepareInput(internal_ports=get_default_internal_ports())
    cloud.prepare_for_submariner(prepare_input, reporter)


def cleanup(cloud: ICloud, reporter: IReporter) -> None:
    cloud.cleanup_after_submariner(reporter)


def run(action: str) -> None:
    lock_dir = os.path.dirname(PREPARE_LOCK_PATH)
    if lock_dir:
        os.makedirs(lock_dir, exist_ok=True)
    with FileLock(PREPARE_LOCK_PATH):
        cloud = get_default_cloud()
        reporter = get_default_reporter()
        if action == PREPARE_ACTION:
            prepare(cloud, reporter)
        else:
            cleanup(cloud, reporter)


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1 or argv[0] not in ACTIONS:
        logger.error('Usage: prepare.py {%s}', '|'.join(ACTIONS))
        return 1
    action = argv[0]
    try:
        run(action)
    except Exception:
        logger.exception('Action %s failed', action)
        return 1
    logger.info('Action %s finished', action)
    return 0


if __name__ == '__main__':
    init_prepare_logger()
    sys.exit(main())
