import mock
import pytest

import prepare
from core.cloud.types import PortSpec, PrepareInput


@pytest.fixture
def lock_path(tmp_path):
    path = str(tmp_path / 'prepare.lock')
    with mock.patch('prepare.PREPARE_LOCK_PATH', path):
        yield path


@pytest.fixture
def default_cloud():
    cloud = mock.Mock()
    with mock.patch('prepare.get_default_cloud', return_value=cloud):
        yield cloud


def test_main_wrong_args():
    assert prepare.main([]) == 1
    assert prepare.main(['deploy']) == 1
    assert prepare.main(['prepare', 'cleanup']) == 1


def test_main_prepare(lock_path, default_cloud):
    with mock.patch(
        'core.cloud.gcp.utils.INTERNAL_PORTS', '4800/udp,8080/tcp'
    ):
        assert prepare.main(['prepare']) == 0
    prepare_input, _ = default_cloud.prepare_for_submariner.call_args[0]
    assert prepare_input == PrepareInput(
        internal_ports=[PortSpec(4800, 'udp'), PortSpec(8080, 'tcp')]
    )
    assert default_cloud.cleanup_after_submariner.call_count == 0


def test_main_cleanup(lock_path, default_cloud):
    assert prepare.main(['cleanup']) == 0
    assert default_cloud.cleanup_after_submariner.call_count == 1
    assert default_cloud.prepare_for_submariner.call_count == 0


def test_main_failure(lock_path, default_cloud):
    default_cloud.cleanup_after_submariner.side_effect = Exception(
        'fake delete error'
    )
    assert prepare.main(['cleanup']) == 1


def test_main_lock_in_working_dir(tmp_path, monkeypatch, default_cloud):
    monkeypatch.chdir(tmp_path)
    with mock.patch('prepare.PREPARE_LOCK_PATH', 'prepare.lock'):
        assert prepare.main(['cleanup']) == 0
    assert default_cloud.cleanup_after_submariner.call_count == 1
