"""
Django management command that checks a running API the way the client does.

Logs in through CommAppApiClient, then shows the main page so the project
list page model loads through ApiProjectRepository.
"""

import asyncio

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from application.page_models import LoadState, create_app_shell
from infrastructure.api_client import (
    ApiClientError,
    ApiProjectRepository,
    ApiProjectTaskRepository,
    CommAppApiClient,
)


class Command(BaseCommand):
    help = 'Check a running API through the client page models'

    def add_arguments(self, parser):
        parser.add_argument('--url', default=settings.COMMAPP_API_URL, help='API base URL')
        parser.add_argument('--username', default='demo.admin')
        parser.add_argument('--password', default='demo-admin-123')

    def handle(self, *args, **options):
        client = CommAppApiClient(options['url'])
        self.stdout.write(f"API: {client.base_url}")

        try:
            client.login(options['username'], options['password'])
        except ApiClientError as e:
            raise CommandError(f"Login failed: {e.status_code} {e.detail}")
        except OSError as e:
            raise CommandError(f"API unreachable: {e}")
        self.stdout.write(self.style.SUCCESS(f"Logged in as {options['username']}"))

        shell = create_app_shell(
            ApiProjectRepository(client),
            ApiProjectTaskRepository(client),
        )
        asyncio.run(shell.main_page.on_appearing())
        model = shell.main_page.binding_context

        if model.state is LoadState.ERROR:
            raise CommandError(f"Project list failed: {model.error}")

        self.stdout.write(self.style.SUCCESS(f"Projects: {len(model.projects)}"))
        for project in model.projects:
            self.stdout.write(
                f"  {project.id}  {project.status.value:<10} "
                f"{project.progress_percent:>6}%  {project.name}"
            )
