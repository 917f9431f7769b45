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
from functools import wraps
from typing import Any, Callable, cast, Dict, Optional, TypeVar

from google.api_core import exceptions as google_exceptions
from google.cloud import compute_v1

from core.cloud.types import ICloud, IReporter, PrepareInput
from core.cloud.gcp.firewall_rules import (
    internal_rule_name,
    is_rule_up_to_date,
    new_internal_firewall_rule
)
from core.cloud.gcp.types import CloudInfo, IGCPClient


logger = logging.getLogger(__name__)


class NotInitializedError(Exception):
    pass


F = TypeVar('F', bound=Callable[..., Any])


def configured_only(func: F) -> F:
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        if self.is_configured():
            return func(self, *args, **kwargs)
        else:
            missing = self.get_missing()
            raise NotInitializedError(f'Missing fields {missing}')
    return cast(F, wrapper)


def format_ports(prepare_input: PrepareInput) -> str:
    return ', '.join(
        f'{ps.port}/{ps.protocol}' for ps in prepare_input.internal_ports
    )


class GCPCloud(ICloud):
    def __init__(self, info: CloudInfo) -> None:
        self.info = info

    @property
    def client(self) -> IGCPClient:
        return self.info.client  # type: ignore

    @property
    def project_id(self) -> str:
        return self.info.project_id  # type: ignore

    def get_missing(self) -> Dict[str, Any]:
        missing: Dict[str, Any] = {}
        if not self.info.infra_id:
            missing.update({'infra_id': self.info.infra_id})
        if not self.info.project_id:
            missing.update({'project_id': self.info.project_id})
        if not self.info.client:
            missing.update({'client': self.info.client})
        return missing

    def is_configured(self) -> bool:
        return all((self.info.infra_id, self.info.project_id, self.info.client))

    @configured_only
    def prepare_for_submariner(
        self,
        prepare_input: PrepareInput,
        reporter: IReporter
    ) -> None:
        ports = format_ports(prepare_input)
        reporter.started(
            'Opening internal ports %s for intra-cluster communications on GCP',
            ports
        )
        rule = new_internal_firewall_rule(
            self.project_id,
            self.info.infra_id,  # type: ignore
            prepare_input.internal_ports
        )
        try:
            self.open_ports(rule)
        except Exception as err:
            reporter.failed(err)
            raise
        reporter.succeeded(
            'Opened internal ports %s with firewall rule %s on GCP',
            ports,
            rule.name
        )

    def open_ports(self, *rules: compute_v1.Firewall) -> None:
        for rule in rules:
            self.apply_rule(rule)

    def get_rule(self, name: str) -> Optional[compute_v1.Firewall]:
        try:
            return self.client.get_firewall_rule(self.project_id, name)
        except google_exceptions.NotFound:
            logger.info('Firewall rule %s does not exist', name)
            return None

    def apply_rule(self, rule: compute_v1.Firewall) -> None:
        actual = self.get_rule(rule.name)
        if actual is None:
            logger.info(
                'Creating firewall rule %s in project %s (region %s)',
                rule.name, self.project_id, self.info.region
            )
            self.client.insert_firewall_rule(self.project_id, rule)
            return

        if is_rule_up_to_date(actual, rule):
            logger.info('Firewall rule %s is up to date', rule.name)
            return
        logger.info(
            'Updating firewall rule %s in project %s',
            rule.name, self.project_id
        )
        self.client.update_firewall_rule(self.project_id, rule.name, rule)

    @configured_only
    def cleanup_after_submariner(self, reporter: IReporter) -> None:
        name = internal_rule_name(self.info.infra_id)  # type: ignore
        reporter.started('Deleting firewall rule %s on GCP', name)
        try:
            self.delete_rule(name)
        except Exception as err:
            reporter.failed(err)
            raise
        reporter.succeeded('Deleted firewall rule %s on GCP', name)

    def delete_rule(self, name: str) -> None:
        logger.info('Deleting firewall rule %s in project %s', name, self.project_id)
        try:
            self.client.delete_firewall_rule(self.project_id, name)
        except google_exceptions.NotFound:
            logger.info('Firewall rule %s is already removed', name)
