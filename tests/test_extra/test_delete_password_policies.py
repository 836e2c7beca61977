"""Test deleting Password Policies listed in a file.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from pathlib import Path

import pytest
from dishka import make_container

from config import Settings
from extra.scripts.delete_password_policies import (
    delete_password_policies_from_file,
    read_batch,
)
from pwpolicy import PasswordPolicyDTO, PasswordPolicyNameCache
from tests.conftest import FakePasswordPolicyGateway, TestProvider


@pytest.fixture
def batch_file(tmp_path: Path) -> Path:
    """Write file with policy names."""
    path = tmp_path / "policies.txt"
    path.write_text(
        "# retired policies\nDefault\n\n  legacy  \nabsent\n",
        encoding="utf-8",
    )
    return path


def test_read_batch(batch_file: Path) -> None:
    """Test blank lines and comments are skipped."""
    batch = read_batch(batch_file)

    assert [dto.name for dto in batch.policies] == [
        "Default",
        "legacy",
        "absent",
    ]


def test_delete_from_file(
    batch_file: Path,
    gateway: FakePasswordPolicyGateway,
    settings: Settings,
) -> None:
    """Test batch is drained through the container use cases."""
    gateway.create(PasswordPolicyDTO(name="Legacy"))
    container = make_container(
        TestProvider(gateway),
        context={Settings: settings},
    )

    try:
        failed = delete_password_policies_from_file(batch_file, container)
        name_cache = container.get(PasswordPolicyNameCache)
    finally:
        container.close()

    assert failed == ["absent"]
    assert gateway.get_all_names() == set()
    assert not name_cache.is_valid("legacy")
