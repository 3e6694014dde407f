"""
Project Views.

API views for projects and project tasks.
"""

import logging

from django.db import transaction
from django.db.models import Count, Q
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status, filters
from rest_framework.decorators import action
from rest_framework.response import Response

from application.tasks.project_tasks import recalculate_project_progress
from domain.project.aggregates import check_status_transition
from domain.shared.value_objects import ProjectStatus
from infrastructure.persistence.models import Project, ProjectTask
from ..serializers.project import (
    ProjectListSerializer,
    ProjectDetailSerializer,
    ProjectTaskSerializer,
    ProjectTaskNestedSerializer,
    ProjectStatusChangeSerializer,
)
from .base import BaseModelViewSet, HistoryViewMixin

logger = logging.getLogger(__name__)


class ProjectViewSet(HistoryViewMixin, BaseModelViewSet):
    """
    ViewSet for projects.

    Endpoints:
    - GET /projects/ - list all projects
    - POST /projects/ - create project
    - GET /projects/{id}/ - get project details with tasks
    - PUT/PATCH /projects/{id}/ - update project
    - DELETE /projects/{id}/ - soft delete project
    - GET/POST /projects/{id}/tasks/ - list or add tasks
    - POST /projects/{id}/recalculate/ - recalculate progress
    - POST /projects/{id}/change-status/ - change status
    - GET /projects/{id}/history/ - change history
    """

    queryset = Project.objects.select_related(
        'facility', 'created_by', 'updated_by'
    ).prefetch_related('tasks')

    serializer_classes = {
        'list': ProjectListSerializer,
        'retrieve': ProjectDetailSerializer,
        'tasks': ProjectTaskNestedSerializer,
        'change_status': ProjectStatusChangeSerializer,
        'default': ProjectDetailSerializer,
    }

    search_fields = ['name', 'description']
    filterset_fields = ['status', 'facility__external_id']
    ordering_fields = ['name', 'created_at', 'updated_at', 'progress_percent']
    ordering = ['-created_at']

    filter_backends = [
        DjangoFilterBackend,
        filters.SearchFilter,
        filters.OrderingFilter,
    ]

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.action == 'list':
            queryset = queryset.annotate(
                tasks_count=Count('tasks', filter=Q(tasks__deleted_at__isnull=True))
            )
        return queryset

    def perform_create(self, serializer):
        project = serializer.save(
            created_by=self.request.user,
            updated_by=self.request.user
        )
        logger.info("Project %s created by %s", project.id, self.request.user)

    def perform_destroy(self, instance):
        super().perform_destroy(instance)
        logger.info("Project %s soft-deleted by %s", instance.id, self.request.user)

    @action(detail=True, methods=['get', 'post'])
    def tasks(self, request, pk=None):
        """
        List the project's tasks (unpaginated, by position) or add one.
        """
        project = self.get_object()

        if request.method == 'GET':
            tasks = project.tasks.filter(deleted_at__isnull=True).order_by('position', 'created_at')
            serializer = ProjectTaskNestedSerializer(tasks, many=True)
            return Response(serializer.data)

        serializer = ProjectTaskNestedSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        with transaction.atomic():
            task = serializer.save(
                project=project,
                created_by=request.user,
                updated_by=request.user
            )
            project.recalculate_progress()

        return Response(
            ProjectTaskNestedSerializer(task).data,
            status=status.HTTP_201_CREATED
        )

    @action(detail=True, methods=['post'])
    def recalculate(self, request, pk=None):
        """
        Recalculate project progress from completed tasks.
        """
        project = self.get_object()
        progress = project.recalculate_progress()

        return Response({
            'progress_percent': float(progress),
            'version': project.version,
        })

    @action(detail=True, methods=['post'], url_path='change-status')
    def change_status(self, request, pk=None):
        """
        Move the project to another status.

        Invalid transitions raise StatusTransitionException (422).
        """
        project = self.get_object()
        serializer = ProjectStatusChangeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        target = ProjectStatus(serializer.validated_data['status'])
        check_status_transition(ProjectStatus(project.status), target)

        old_status = project.status
        project.status = target.value
        project.updated_by = request.user
        project.save(update_fields=['status', 'updated_by', 'updated_at', 'version'])
        logger.info("Project %s status %s -> %s", project.id, old_status, project.status)

        return Response({
            'id': str(project.id),
            'status': project.status,
            'status_display': project.get_status_display(),
        })


class ProjectTaskViewSet(BaseModelViewSet):
    """
    ViewSet for project tasks.

    Endpoints:
    - GET /project-tasks/ - list tasks (filter by project, is_completed)
    - POST /project-tasks/ - create task
    - GET /project-tasks/{id}/ - get task
    - PUT/PATCH /project-tasks/{id}/ - update task
    - DELETE /project-tasks/{id}/ - soft delete task
    - POST /project-tasks/{id}/toggle/ - flip completion
    """

    queryset = ProjectTask.objects.select_related('project').filter(
        project__deleted_at__isnull=True
    )
    serializer_class = ProjectTaskSerializer

    search_fields = ['title']
    filterset_fields = ['project', 'is_completed']
    ordering_fields = ['position', 'created_at', 'title']
    ordering = ['project', 'position']

    filter_backends = [
        DjangoFilterBackend,
        filters.SearchFilter,
        filters.OrderingFilter,
    ]

    def _schedule_recalculation(self, project_id):
        transaction.on_commit(
            lambda: recalculate_project_progress.delay(str(project_id))
        )

    def perform_create(self, serializer):
        super().perform_create(serializer)
        self._schedule_recalculation(serializer.instance.project_id)

    def perform_update(self, serializer):
        super().perform_update(serializer)
        self._schedule_recalculation(serializer.instance.project_id)

    def perform_destroy(self, instance):
        super().perform_destroy(instance)
        self._schedule_recalculation(instance.project_id)

    @action(detail=True, methods=['post'])
    def toggle(self, request, pk=None):
        """Flip is_completed and recalculate the project's progress."""
        task = self.get_object()
        task.set_completed(not task.is_completed, user=request.user)
        self._schedule_recalculation(task.project_id)

        return Response(ProjectTaskSerializer(task).data)
