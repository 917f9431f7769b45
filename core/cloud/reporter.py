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
import sys
from typing import Optional, TextIO

from core.cloud.types import IReporter


logger = logging.getLogger(__name__)

RED_LIGHT = '\u274C'
GREEN_LIGHT = '\u2705'
EXCLAMATION_MARK = '\u2757'
IN_PROGRESS_MARK = '\u2026'


def compose_message(message: str, *args) -> str:
    if args:
        return message % args
    return message


class StdoutReporter(IReporter):
    """ Writes a single marked line per event to the stream """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # resolved per write, stdout may be swapped
        return self._stream if self._stream is not None else sys.stdout

    def _write(self, mark: str, text: str) -> None:
        self.stream.write(f'{mark} {text}\n')
        self.stream.flush()

    def started(self, message: str, *args) -> None:
        self._write(IN_PROGRESS_MARK, compose_message(message, *args))

    def succeeded(self, message: str, *args) -> None:
        self._write(GREEN_LIGHT, compose_message(message, *args))

    def failed(self, *errors: Exception) -> None:
        for err in errors:
            self._write(RED_LIGHT, str(err) or err.__class__.__name__)

    def warning(self, message: str, *args) -> None:
        self._write(EXCLAMATION_MARK, compose_message(message, *args))


class LoggingReporter(IReporter):
    def __init__(self, log: Optional[logging.Logger] = None) -> None:
        self.log = log or logger

    def started(self, message: str, *args) -> None:
        self.log.info(message, *args)

    def succeeded(self, message: str, *args) -> None:
        self.log.info(message, *args)

    def failed(self, *errors: Exception) -> None:
        for err in errors:
            self.log.error('Operation failed: %s', err)

    def warning(self, message: str, *args) -> None:
        self.log.warning(message, *args)


def get_default_reporter() -> IReporter:
    return StdoutReporter()
