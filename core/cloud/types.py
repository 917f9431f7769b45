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

from abc import ABC, abstractmethod
from collections import namedtuple
from typing import List, NamedTuple


class PortSpec(namedtuple('PortSpec', ['port', 'protocol'])):
    def __new__(cls, port: int, protocol: str) -> 'PortSpec':
        return super(PortSpec, cls).__new__(cls, int(port), protocol)

    def __repr__(self) -> str:
        return f'PortSpec({self.port}/{self.protocol})'


class PrepareInput(NamedTuple):
    internal_ports: List[PortSpec]


class IReporter(ABC):
    @abstractmethod
    def started(self, message: str, *args) -> None:  # pragma: no cover
        pass

    @abstractmethod
    def succeeded(self, message: str, *args) -> None:  # pragma: no cover
        pass

    @abstractmethod
    def failed(self, *errors: Exception) -> None:  # pragma: no cover
        pass

    @abstractmethod
    def warning(self, message: str, *args) -> None:  # pragma: no cover
        pass


class ICloud(ABC):
    @abstractmethod
    def prepare_for_submariner(
        self,
        prepare_input: PrepareInput,
        reporter: IReporter
    ) -> None:  # pragma: no cover
        pass

    @abstractmethod
    def cleanup_after_submariner(
        self,
        reporter: IReporter
    ) -> None:  # pragma: no cover
        pass
