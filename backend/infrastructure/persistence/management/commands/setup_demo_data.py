"""\
Setup Demo Data Command.

Purpose:
- Clear projects and tasks.
- Seed a demo admin user, the built-in facility and a handful of projects
  with tasks in various states of completion.

This command is intended for local demo environments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from domain.facility import MOCK_FACILITY


@dataclass(frozen=True)
class DemoProjectSpec:
    name: str
    description: str
    icon: str
    status: str
    tasks: Tuple[str, ...]
    completed: int


DEMO_PROJECTS = (
    DemoProjectSpec(
        name='Spring resident onboarding',
        description='Paperwork and room preparation for new residents',
        icon='clipboard',
        status='active',
        tasks=('Collect medical history', 'Assign room', 'Schedule orientation', 'Family welcome call'),
        completed=2,
    ),
    DemoProjectSpec(
        name='Kitchen renovation',
        description='Replace appliances in the main kitchen',
        icon='tools',
        status='on_hold',
        tasks=('Get contractor quotes', 'Approve budget', 'Order appliances'),
        completed=1,
    ),
    DemoProjectSpec(
        name='Annual state inspection',
        description='Prepare documentation for the state licensing visit',
        icon='shield',
        status='draft',
        tasks=('Update fire drill log', 'Review staff certifications'),
        completed=0,
    ),
)


class Command(BaseCommand):
    help = 'Reset projects and seed demo facility, users and projects'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Only clear projects (no seeding)'
        )
        parser.add_argument(
            '--password',
            type=str,
            default='demo-admin-123',
            help='Password for the demo admin user'
        )

    def handle(self, *args, **options):
        from infrastructure.persistence.models import Facility, Project, ProjectTask

        only_clear = bool(options.get('clear'))
        password = options.get('password')

        with transaction.atomic():
            self.stdout.write('Clearing projects...')
            ProjectTask.all_objects.all().delete()
            Project.all_objects.all().delete()
            self.stdout.write(self.style.SUCCESS('Projects cleared.'))

            if only_clear:
                return

            admin = self._ensure_admin(password)
            facility = self._ensure_facility(Facility)

            for spec in DEMO_PROJECTS:
                project = Project.objects.create(
                    name=spec.name,
                    description=spec.description,
                    icon=spec.icon,
                    status=spec.status,
                    facility=facility,
                    created_by=admin,
                    updated_by=admin,
                )
                for index, title in enumerate(spec.tasks):
                    task = ProjectTask.objects.create(
                        project=project,
                        title=title,
                        position=index,
                        created_by=admin,
                        updated_by=admin,
                    )
                    if index < spec.completed:
                        task.set_completed(True, user=admin)
                project.recalculate_progress()
                self.stdout.write(f'  {project.name}: {project.progress_percent}%')

        self.stdout.write(self.style.SUCCESS(
            f'Demo data ready. Login: demo.admin / {password}, facility {facility.external_id}'
        ))

    def _ensure_admin(self, password):
        User = get_user_model()
        admin, created = User.objects.get_or_create(
            username='demo.admin',
            defaults={'email': 'demo.admin@example.com', 'is_staff': True, 'is_superuser': True},
        )
        if created:
            admin.set_password(password)
            admin.save()
            self.stdout.write(self.style.SUCCESS('Created user demo.admin'))
        return admin

    def _ensure_facility(self, Facility):
        facility, _ = Facility.objects.update_or_create(
            name=MOCK_FACILITY.name,
            defaults={
                'short_name': MOCK_FACILITY.short_name,
                'address': MOCK_FACILITY.address.street,
                'city': MOCK_FACILITY.address.city,
                'state': MOCK_FACILITY.address.state,
                'zip': MOCK_FACILITY.address.zip_code,
                'country': MOCK_FACILITY.address.country,
                'phone': MOCK_FACILITY.contact.phone,
                'email': MOCK_FACILITY.contact.email,
                'website': MOCK_FACILITY.contact.website or '',
                'primary_color': MOCK_FACILITY.settings.primary_color,
                'secondary_color': MOCK_FACILITY.settings.secondary_color,
                'theme': MOCK_FACILITY.settings.theme.value,
            },
        )
        return facility
