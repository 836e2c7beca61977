"""Delete Password Policies listed in a file.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from pathlib import Path

from dishka import Container, Scope
from loguru import logger

from pwpolicy import PasswordPolicyUseCases
from pwpolicy.batch import PasswordPolicyDeleteBatch, delete_password_policies


def read_batch(path: Path) -> PasswordPolicyDeleteBatch:
    """Read policy names, one per line; blank lines and `#` are skipped."""
    names = []
    for line in path.read_text(encoding="utf-8").splitlines():
        name = line.strip()
        if name and not name.startswith("#"):
            names.append(name)

    return PasswordPolicyDeleteBatch.from_names(names)


def delete_password_policies_from_file(
    path: Path,
    container: Container,
) -> list[str]:
    """Drain the batch from file through the policy use cases.

    :param Path path: file with policy names
    :param Container container: DI container
    :return list[str]: names which were not deleted
    """
    batch = read_batch(path)
    logger.info(f"Deleting {len(batch)} Password Policies from {path}")

    with container(scope=Scope.REQUEST) as request_container:
        use_cases = request_container.get(PasswordPolicyUseCases)
        failed = delete_password_policies(batch, use_cases)

    if failed:
        logger.warning(f"Password Policies not deleted: {failed}")

    return failed
