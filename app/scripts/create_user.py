"""
Create an admin or student account. Run from project root:
  python -m app.scripts.create_user admin USERNAME PASSWORD --name "Full Name"
  python -m app.scripts.create_user student NIS PASSWORD --name "Full Name" --virtual-account VA
Example:
  python -m app.scripts.create_user admin bendahara your-secure-password --name Bendahara
"""
import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.database import build_engine, build_session_factory
from app.core.security import PASSWORD_MIN_LEN, hash_password
from app.services.users import DuplicateUserError, create_admin, create_student

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Komite Sekolah account (no registration UI).")
    parser.add_argument("role", choices=["admin", "student"])
    parser.add_argument("login", help="Username for admins, NIS for students")
    parser.add_argument("password", help=f"Password (at least {PASSWORD_MIN_LEN} chars)")
    parser.add_argument("--name", required=True, help="Display name")
    parser.add_argument("--virtual-account", help="Virtual account (students only)")
    args = parser.parse_args(argv)

    login = args.login.strip()
    if not login or len(login) > 255:
        print("Invalid username/NIS length.", file=sys.stderr)
        return 1
    if len(args.password) < PASSWORD_MIN_LEN:
        print(f"Password must be at least {PASSWORD_MIN_LEN} characters.", file=sys.stderr)
        return 1
    if args.role == "student" and not args.virtual_account:
        print("Students need --virtual-account.", file=sys.stderr)
        return 1

    settings = get_settings()
    engine = build_engine(settings)
    db = build_session_factory(engine)()
    try:
        password_hash = hash_password(args.password, rounds=settings.BCRYPT_ROUNDS)
        if args.role == "admin":
            user = create_admin(db, username=login, name=args.name, password_hash=password_hash)
        else:
            user = create_student(
                db,
                nis=login,
                virtual_account=args.virtual_account.strip(),
                name=args.name,
                password_hash=password_hash,
            )
    except DuplicateUserError:
        print(f"Account '{login}' already exists.", file=sys.stderr)
        return 1
    finally:
        db.close()
        engine.dispose()

    logger.info("Created %s id=%s login=%s", user.role, user.id, login)
    return 0


if __name__ == "__main__":
    sys.exit(main())
