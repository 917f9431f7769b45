""" cloud-prepare test utilities """

from google.api_core import exceptions as google_exceptions

from core.cloud.gcp.types import IGCPClient
from core.cloud.types import PortSpec, PrepareInput


INFRA_ID = 'test-infraID'
REGION = 'test-region'
PROJECT_ID = 'test-projectID'
INGRESS_RULE_NAME = 'test-infraID-submariner-internal-ports-ingress'

INTERNAL_PORTS = [
    PortSpec(100, 'TCP'),
    PortSpec(200, 'UDP')
]
PREPARE_INPUT = PrepareInput(internal_ports=INTERNAL_PORTS)


class FakeGCPClient(IGCPClient):
    def __init__(self):
        self._rules = {}
        self.inserted = 0
        self.updated = 0

    def get_firewall_rule(self, project_id, name):
        try:
            return self._rules[(project_id, name)]
        except KeyError:
            raise google_exceptions.NotFound(f'Firewall rule {name} not found')

    def insert_firewall_rule(self, project_id, rule):
        if (project_id, rule.name) in self._rules:
            raise google_exceptions.Conflict(f'Firewall rule {rule.name} exists')
        self._rules[(project_id, rule.name)] = rule
        self.inserted += 1

    def update_firewall_rule(self, project_id, name, rule):
        self.get_firewall_rule(project_id, name)
        self._rules[(project_id, name)] = rule
        self.updated += 1

    def delete_firewall_rule(self, project_id, name):
        self.get_firewall_rule(project_id, name)
        del self._rules[(project_id, name)]

    def has_rule(self, project_id, name):
        return (project_id, name) in self._rules
