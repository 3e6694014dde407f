"""
Project Tasks.

Celery tasks for project-related operations.
"""

from celery import shared_task
from django.db import transaction
import logging

logger = logging.getLogger(__name__)


@shared_task(bind=True, max_retries=3)
def recalculate_project_progress(self, project_id: str):
    """
    Recalculate progress for a specific project.
    
    progress = completed tasks / all tasks * 100, rounded to 2 places.
    """
    from infrastructure.persistence.models import Project
    
    try:
        with transaction.atomic():
            project = Project.objects.select_for_update().get(id=project_id)
            progress = project.recalculate_progress()
        
        logger.info(f"Recalculated project {project.name}: {progress}%")
        
        return {
            'project_id': str(project_id),
            'progress': float(progress),
        }
        
    except Project.DoesNotExist:
        logger.error(f"Project {project_id} not found")
        return {'error': 'Project not found'}
    except Exception as e:
        logger.error(f"Error recalculating project {project_id}: {e}")
        raise self.retry(exc=e, countdown=60)


@shared_task
def recalculate_active_projects():
    """Recalculate progress for all active projects."""
    from infrastructure.persistence.models import Project, ProjectStatusChoices
    
    project_ids = [
        str(pk) for pk in Project.objects.filter(
            status__in=[ProjectStatusChoices.ACTIVE, ProjectStatusChoices.ON_HOLD]
        ).values_list('id', flat=True)
    ]
    
    for project_id in project_ids:
        recalculate_project_progress.delay(project_id)
    
    return {'scheduled': len(project_ids), 'project_ids': project_ids}
