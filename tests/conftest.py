import mock
import pytest

from core.cloud.gcp.cloud import GCPCloud
from core.cloud.gcp.types import CloudInfo, IGCPClient
from core.cloud.types import IReporter

from tests.utils import FakeGCPClient, INFRA_ID, PROJECT_ID, REGION


@pytest.fixture
def gcp_client():
    return mock.Mock(spec=IGCPClient)


@pytest.fixture
def fake_gcp_client():
    return FakeGCPClient()


@pytest.fixture
def reporter():
    return mock.Mock(spec=IReporter)


@pytest.fixture
def cloud(gcp_client):
    return GCPCloud(CloudInfo(
        infra_id=INFRA_ID,
        region=REGION,
        project_id=PROJECT_ID,
        client=gcp_client
    ))
