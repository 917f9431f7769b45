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
from typing import Any, Optional

from google.cloud import compute_v1
from google.oauth2 import service_account

from core.cloud.gcp.types import IGCPClient
from tools.configs.gcp import GCP_CREDENTIALS_PATH, GCP_OPERATION_TIMEOUT


logger = logging.getLogger(__name__)


class OperationFailedError(Exception):
    pass


def get_credentials(
    credentials_path: Optional[str] = GCP_CREDENTIALS_PATH
) -> Optional[service_account.Credentials]:
    if not credentials_path:
        logger.info('Using application default credentials')
        return None
    logger.info('Loading service account credentials from %s', credentials_path)
    return service_account.Credentials.from_service_account_file(
        credentials_path
    )


class GCPClient(IGCPClient):
    """
    Firewall operations on top of the Compute Engine API.
    Mutating calls block until the operation is finished.
    """

    def __init__(
        self,
        firewalls_client: Optional[compute_v1.FirewallsClient] = None,
        credentials_path: Optional[str] = GCP_CREDENTIALS_PATH,
        operation_timeout: int = GCP_OPERATION_TIMEOUT
    ) -> None:
        self._firewalls_client = firewalls_client
        self.credentials_path = credentials_path
        self.operation_timeout = operation_timeout

    @property
    def firewalls(self) -> compute_v1.FirewallsClient:
        if not self._firewalls_client:
            self._firewalls_client = compute_v1.FirewallsClient(
                credentials=get_credentials(self.credentials_path)
            )
        return self._firewalls_client

    def wait_for_operation(self, operation: Any, description: str) -> Any:
        result = operation.result(timeout=self.operation_timeout)
        if operation.error_code:
            logger.error(
                'Operation %s failed with %s: %s',
                description, operation.error_code, operation.error_message
            )
            raise operation.exception() or OperationFailedError(
                f'{description} failed: {operation.error_message}'
            )
        for warning in operation.warnings or []:
            logger.warning(
                'Operation %s warning %s: %s',
                description, warning.code, warning.message
            )
        return result

    def get_firewall_rule(self, project_id: str, name: str) -> compute_v1.Firewall:
        logger.debug('Getting firewall rule %s in %s', name, project_id)
        return self.firewalls.get(project=project_id, firewall=name)

    def insert_firewall_rule(
        self,
        project_id: str,
        rule: compute_v1.Firewall
    ) -> None:
        operation = self.firewalls.insert(
            project=project_id,
            firewall_resource=rule
        )
        self.wait_for_operation(operation, f'insert of firewall rule {rule.name}')

    def update_firewall_rule(
        self,
        project_id: str,
        name: str,
        rule: compute_v1.Firewall
    ) -> None:
        operation = self.firewalls.update(
            project=project_id,
            firewall=name,
            firewall_resource=rule
        )
        self.wait_for_operation(operation, f'update of firewall rule {name}')

    def delete_firewall_rule(self, project_id: str, name: str) -> None:
        operation = self.firewalls.delete(project=project_id, firewall=name)
        self.wait_for_operation(operation, f'deletion of firewall rule {name}')
