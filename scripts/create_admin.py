# create_admin.py

import os
import sys
from getpass import getpass

from werkzeug.security import generate_password_hash

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app  # noqa: E402
from nouasseur_app.models import User  # noqa: E402

DEFAULT_USERNAME = "admin"
DEFAULT_EMAIL = "admin@nouasseur.org"


def create_admin():
    app = create_app()
    with app.app_context():
        username = input(f"Enter username [{DEFAULT_USERNAME}]: ").strip() or DEFAULT_USERNAME

        if User.find_by_username(username):
            print(f"User '{username}' already exists, nothing to do.")
            return

        email = input(f"Enter email [{DEFAULT_EMAIL}]: ").strip() or DEFAULT_EMAIL
        if User.find_by_email(email):
            print("Error: Email already exists.")
            sys.exit(1)

        password = getpass("Enter password: ")
        password2 = getpass("Confirm password: ")

        if password != password2:
            print("Error: Passwords do not match.")
            sys.exit(1)

        if len(password) < 6:
            print("Error: Password must be at least 6 characters.")
            sys.exit(1)

        admin_user, error = User.safe_create(
            username=username,
            email=email,
            password_hash=generate_password_hash(password),
        )

        if error:
            print("Error creating admin account; see the application log for details.")
            sys.exit(1)

        print("Admin account created successfully!")
        print(f"   Username: {admin_user.username}")
        print(f"   Email: {admin_user.email}")


if __name__ == "__main__":
    create_admin()
