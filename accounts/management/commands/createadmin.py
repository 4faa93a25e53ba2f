from django.core.management.base import BaseCommand
from django.contrib.auth import get_user_model

from accounts.models import normalize_email

User = get_user_model()


class Command(BaseCommand):
    help = "Creates a verified admin account (no-op if the email is already registered)"

    def add_arguments(self, parser):
        parser.add_argument("email", nargs="?", default="admin@ieee.com")
        parser.add_argument("password", nargs="?", default="admin123")
        parser.add_argument("name", nargs="?", default="Admin User")

    def handle(self, *args, **options):
        email = normalize_email(options["email"])

        if User.objects.filter(email=email).exists():
            self.stdout.write(self.style.WARNING("Admin user already exists!"))
            return

        admin = User.objects.create_user(
            email=email,
            password=options["password"],
            name=options["name"],
            role=User.ROLE_ADMIN,
            is_verified=True,
        )

        self.stdout.write(self.style.SUCCESS("Admin user created successfully!"))
        self.stdout.write(f"Email: {admin.email}")
        self.stdout.write("Please change the password after first login!")
