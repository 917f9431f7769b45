from abc import ABC, abstractmethod
from typing import NamedTuple, Optional

from google.cloud.compute_v1 import Firewall


class IGCPClient(ABC):
    @abstractmethod
    def get_firewall_rule(
        self,
        project_id: str,
        name: str
    ) -> Firewall:  # pragma: no cover
        pass

    @abstractmethod
    def insert_firewall_rule(
        self,
        project_id: str,
        rule: Firewall
    ) -> None:  # pragma: no cover
        pass

    @abstractmethod
    def update_firewall_rule(
        self,
        project_id: str,
        name: str,
        rule: Firewall
    ) -> None:  # pragma: no cover
        pass

    @abstractmethod
    def delete_firewall_rule(
        self,
        project_id: str,
        name: str
    ) -> None:  # pragma: no cover
        pass


class CloudInfo(NamedTuple):
    infra_id: Optional[str] = None
    region: Optional[str] = None
    project_id: Optional[str] = None
    client: Optional[IGCPClient] = None
