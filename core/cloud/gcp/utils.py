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
from typing import List, Optional

from core.cloud.types import PortSpec
from core.cloud.gcp.client import GCPClient
from core.cloud.gcp.cloud import GCPCloud
from core.cloud.gcp.types import CloudInfo, IGCPClient
from tools.configs import INFRA_ID
from tools.configs.gcp import GCP_PROJECT_ID, GCP_REGION, INTERNAL_PORTS


logger = logging.getLogger(__name__)

SUPPORTED_PROTOCOLS = ('tcp', 'udp', 'sctp', 'icmp', 'esp', 'ah', 'ipip', 'all')


def parse_port_spec(plain: str) -> PortSpec:
    try:
        port, protocol = plain.strip().split('/')
        port_number = int(port)
    except ValueError:
        raise ValueError(f'Port spec {plain!r} is not in <port>/<protocol> form')
    if not 0 < port_number < 65536:
        raise ValueError(f'Port {port_number} is out of range')
    if protocol.lower() not in SUPPORTED_PROTOCOLS:
        raise ValueError(f'Protocol {protocol!r} is not supported')
    return PortSpec(port_number, protocol)


def parse_port_specs(plain: str) -> List[PortSpec]:
    return [parse_port_spec(item) for item in plain.split(',') if item.strip()]


def get_default_internal_ports() -> List[PortSpec]:
    return parse_port_specs(INTERNAL_PORTS)


def get_default_cloud(
    infra_id: Optional[str] = INFRA_ID,
    region: Optional[str] = GCP_REGION,
    project_id: Optional[str] = GCP_PROJECT_ID,
    client: Optional[IGCPClient] = None
) -> GCPCloud:
    logger.info('Creating GCP cloud for %s in project %s', infra_id, project_id)
    return GCPCloud(CloudInfo(
        infra_id=infra_id,
        region=region,
        project_id=project_id,
        client=client or GCPClient()
    ))
