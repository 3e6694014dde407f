"""
Project Serializers.

Serializers for projects and project tasks.
"""

from rest_framework import serializers

from domain.project.aggregates import check_status_transition
from domain.shared.exceptions import StatusTransitionException
from domain.shared.value_objects import ProjectStatus
from infrastructure.persistence.models import (
    Facility,
    Project,
    ProjectTask,
    ProjectStatusChoices,
)
from .base import BaseModelSerializer, UserMinimalSerializer


class ProjectTaskSerializer(BaseModelSerializer):
    """
    Serializer for project tasks.

    `id` may be supplied on create so clients can keep ids they generated
    offline.
    """

    id = serializers.UUIDField(required=False)

    class Meta:
        model = ProjectTask
        fields = [
            'id', 'project', 'title', 'is_completed', 'position',
            'completed_at', 'version', 'created_at', 'updated_at',
        ]
        read_only_fields = ['completed_at', 'version', 'created_at', 'updated_at']
        extra_kwargs = {
            'position': {'required': False, 'allow_null': False},
        }

    def validate_title(self, value):
        if not value.strip():
            raise serializers.ValidationError('Title is required.')
        return value.strip()

    def validate_id(self, value):
        if self.instance is None and ProjectTask.all_objects.filter(id=value).exists():
            raise serializers.ValidationError('A task with this id already exists.')
        return value

    def update(self, instance, validated_data):
        validated_data.pop('id', None)
        completed = validated_data.pop('is_completed', instance.is_completed)
        if completed != instance.is_completed:
            instance.apply_completion(completed, user=validated_data.get('updated_by'))
        return super().update(instance, validated_data)


class ProjectTaskNestedSerializer(ProjectTaskSerializer):
    """Task serializer used under a project (project comes from the URL)."""

    class Meta(ProjectTaskSerializer.Meta):
        read_only_fields = ProjectTaskSerializer.Meta.read_only_fields + ['project']


class ProjectListSerializer(BaseModelSerializer):
    """List serializer for projects."""

    status_display = serializers.CharField(source='get_status_display', read_only=True)
    facility = serializers.SlugRelatedField(
        slug_field='external_id',
        read_only=True
    )
    tasks_count = serializers.IntegerField(read_only=True, default=None)

    class Meta:
        model = Project
        fields = [
            'id', 'name', 'description', 'icon',
            'status', 'status_display', 'facility',
            'progress_percent', 'tasks_count', 'version',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class ProjectDetailSerializer(BaseModelSerializer):
    """Detail serializer for projects, with tasks."""

    id = serializers.UUIDField(required=False)
    status_display = serializers.CharField(source='get_status_display', read_only=True)
    facility = serializers.SlugRelatedField(
        slug_field='external_id',
        queryset=Facility.objects.all(),
        required=False,
        allow_null=True
    )
    tasks = serializers.SerializerMethodField()
    created_by_detail = UserMinimalSerializer(source='created_by', read_only=True)
    updated_by_detail = UserMinimalSerializer(source='updated_by', read_only=True)

    class Meta:
        model = Project
        fields = [
            'id', 'name', 'description', 'icon',
            'status', 'status_display', 'facility',
            'progress_percent', 'tasks', 'version',
            'created_by_detail', 'updated_by_detail',
            'created_at', 'updated_at',
        ]
        read_only_fields = ['progress_percent', 'version', 'created_at', 'updated_at']

    def get_tasks(self, obj):
        tasks = [t for t in obj.tasks.all() if t.deleted_at is None]
        return ProjectTaskNestedSerializer(tasks, many=True).data

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError('Name is required.')
        return value.strip()

    def validate_id(self, value):
        if self.instance is None and Project.all_objects.filter(id=value).exists():
            raise serializers.ValidationError('A project with this id already exists.')
        return value

    def validate_status(self, value):
        if self.instance is not None and value != self.instance.status:
            try:
                check_status_transition(
                    ProjectStatus(self.instance.status),
                    ProjectStatus(value)
                )
            except StatusTransitionException as e:
                raise serializers.ValidationError(e.message)
        return value

    def update(self, instance, validated_data):
        validated_data.pop('id', None)
        return super().update(instance, validated_data)


class ProjectStatusChangeSerializer(serializers.Serializer):
    """Serializer for the change-status action."""

    status = serializers.ChoiceField(choices=ProjectStatusChoices.choices)
