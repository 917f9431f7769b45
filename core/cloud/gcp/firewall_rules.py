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
from typing import Iterable, List, Tuple

from google.cloud import compute_v1

from core.cloud.types import PortSpec


logger = logging.getLogger(__name__)

INGRESS_DIRECTION = 'INGRESS'
EGRESS_DIRECTION = 'EGRESS'

INTERNAL_PORTS_RULE_NAME = 'submariner-internal-ports'

NETWORK_PATH_PREFIX = 'projects/'

# API default, applied when a rule is created without a priority
DEFAULT_PRIORITY = 1000


def generate_rule_name(infra_id: str, name: str, direction: str) -> str:
    return f'{infra_id}-{name}-{direction.lower()}'


def internal_rule_name(infra_id: str) -> str:
    return generate_rule_name(
        infra_id,
        INTERNAL_PORTS_RULE_NAME,
        INGRESS_DIRECTION
    )


def network_path(project_id: str, infra_id: str) -> str:
    return f'projects/{project_id}/global/networks/{infra_id}-network'


def cluster_tags(infra_id: str) -> List[str]:
    return [f'{infra_id}-worker', f'{infra_id}-master']


def port_spec_to_allowed(port_spec: PortSpec) -> compute_v1.Allowed:
    return compute_v1.Allowed(
        I_p_protocol=port_spec.protocol,
        ports=[str(port_spec.port)]
    )


def new_firewall_rule(
    project_id: str,
    infra_id: str,
    name: str,
    direction: str,
    ports: Iterable[PortSpec]
) -> compute_v1.Firewall:
    return compute_v1.Firewall(
        name=name,
        network=network_path(project_id, infra_id),
        direction=direction,
        priority=DEFAULT_PRIORITY,
        disabled=False,
        allowed=[port_spec_to_allowed(ps) for ps in ports]
    )


def new_internal_firewall_rule(
    project_id: str,
    infra_id: str,
    ports: Iterable[PortSpec]
) -> compute_v1.Firewall:
    """
    Ingress rule that opens internal ports between the nodes of the cluster.
    Both source and target are restricted to worker and master instances.
    """
    rule = new_firewall_rule(
        project_id,
        infra_id,
        internal_rule_name(infra_id),
        INGRESS_DIRECTION,
        ports
    )
    rule.source_tags = cluster_tags(infra_id)
    rule.target_tags = cluster_tags(infra_id)
    return rule


def normalize_network(network: str) -> str:
    # API returns full self links, rules are built with relative paths
    pos = network.find(NETWORK_PATH_PREFIX)
    return network[pos:] if pos >= 0 else network


def protocol_pairs(entries: Iterable) -> List[Tuple[str, Tuple[str, ...]]]:
    return sorted(
        (entry.I_p_protocol.lower(), tuple(entry.ports))
        for entry in entries
    )


def allowed_pairs(rule: compute_v1.Firewall) -> List[Tuple[str, Tuple[str, ...]]]:
    return protocol_pairs(rule.allowed)


def denied_pairs(rule: compute_v1.Firewall) -> List[Tuple[str, Tuple[str, ...]]]:
    return protocol_pairs(rule.denied)


def rule_priority(rule: compute_v1.Firewall) -> int:
    return rule.priority if 'priority' in rule else DEFAULT_PRIORITY


def is_rule_up_to_date(
    actual: compute_v1.Firewall,
    expected: compute_v1.Firewall
) -> bool:
    up_to_date = all((
        actual.direction == expected.direction,
        normalize_network(actual.network) ==
        normalize_network(expected.network),
        bool(actual.disabled) == bool(expected.disabled),
        rule_priority(actual) == rule_priority(expected),
        allowed_pairs(actual) == allowed_pairs(expected),
        denied_pairs(actual) == denied_pairs(expected),
        sorted(actual.source_ranges) == sorted(expected.source_ranges),
        sorted(actual.source_tags) == sorted(expected.source_tags),
        sorted(actual.target_tags) == sorted(expected.target_tags),
        sorted(actual.source_service_accounts) ==
        sorted(expected.source_service_accounts),
        sorted(actual.target_service_accounts) ==
        sorted(expected.target_service_accounts)
    ))
    logger.debug('Rule %s up to date: %s', expected.name, up_to_date)
    return up_to_date
