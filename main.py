"""Main entry point for the Password Vault: generate and store a password."""

import logging
import sys
from shared.config.config import config
from shared.factories.repository_factory import create_repository
from shared.implementations.hashers import BcryptPasswordHasher
from vault.infrastructure.cache import PasswordCache
from vault.services.password_generator import validate_generation_params
from vault.services.password_service import PasswordService

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)

USAGE = "Usage: python main.py <length> <complexity> <owner> [tag ...]"


def parse_args(argv: list[str]) -> tuple[int, int, str, list[str]]:
    """
    Parse and validate command line arguments.

    Returns:
        Tuple of (length, complexity, owner, tags)

    Raises:
        ValueError: If arguments are missing, not integers, or out of range
    """
    if len(argv) < 3:
        raise ValueError(USAGE)
    try:
        length = int(argv[0])
        complexity = int(argv[1])
    except ValueError:
        raise ValueError("Length and complexity must be integers.")
    owner = argv[2].strip()
    if not owner:
        raise ValueError("Owner must not be empty.")
    validate_generation_params(length, complexity)
    return length, complexity, owner, argv[3:]


def main(argv: list[str] | None = None) -> int:
    """Main execution function. Returns the process exit code."""
    argv = sys.argv[1:] if argv is None else argv

    try:
        length, complexity, owner, tags = parse_args(argv)
    except ValueError as e:
        print(str(e))
        return 1

    service = PasswordService(
        repository=create_repository(),
        cache=PasswordCache(),
        hasher=BcryptPasswordHasher(),
    )

    try:
        password, record = service.generate_for_owner(length, complexity, owner, tags)
    except Exception as e:
        logger.error(f"Failed to store password for {owner!r}: {e}", exc_info=True)
        return 1

    logger.info(f"Stored password {record.id} ({config.REPOSITORY_BACKEND} backend)")
    print(f"Password for {owner}: {password}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
