"""Print an argon2 hash to put in ADMIN_PASSWORD_HASH."""
import getpass
import sys

from app.services.passwords import hash_password


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    password = argv[0] if argv else getpass.getpass("Admin password: ")
    if not password:
        print("empty password", file=sys.stderr)
        return 1
    print(hash_password(password))
    return 0


if __name__ == "__main__":
    sys.exit(main())
