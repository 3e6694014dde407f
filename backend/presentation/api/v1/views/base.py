"""
Base Views.

Common view mixins and base classes.
"""

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated


class AuditViewMixin:
    """
    Mixin that adds audit fields on create/update.
    """
    
    def perform_create(self, serializer):
        """Set created_by and updated_by on create."""
        serializer.save(
            created_by=self.request.user,
            updated_by=self.request.user
        )
    
    def perform_update(self, serializer):
        """Set updated_by on update."""
        serializer.save(updated_by=self.request.user)


class SoftDeleteViewMixin:
    """
    Mixin turning DELETE into a soft delete.
    
    The model must provide soft_delete(user) (see SoftDeleteMixin) and the
    viewset queryset must exclude deleted rows.
    """
    
    def perform_destroy(self, instance):
        instance.soft_delete(user=self.request.user)


class HistoryViewMixin:
    """
    Mixin for accessing object history.
    """
    
    @action(detail=True, methods=['get'])
    def history(self, request, *args, **kwargs):
        """Get object history."""
        obj = self.get_object()
        
        if not hasattr(obj, 'history'):
            return Response(
                {'error': 'History is not available for this object'},
                status=status.HTTP_400_BAD_REQUEST
            )
        
        history = obj.history.all()[:50]
        data = [{
            'id': h.history_id,
            'date': h.history_date,
            'user': str(h.history_user) if h.history_user else None,
            'type': h.history_type,
            'changes': h.history_change_reason,
        } for h in history]
        
        return Response(data)


class BaseModelViewSet(
    AuditViewMixin,
    SoftDeleteViewMixin,
    viewsets.ModelViewSet
):
    """
    Base viewset with common functionality.
    """
    permission_classes = [IsAuthenticated]
    
    def get_serializer_class(self):
        """
        Return different serializers per action.
        
        Override `serializer_classes` dict in subclass:
        serializer_classes = {
            'list': ListSerializer,
            'retrieve': DetailSerializer,
            'default': DetailSerializer,
        }
        """
        serializer_classes = getattr(self, 'serializer_classes', {})
        serializer_class = serializer_classes.get(
            self.action,
            serializer_classes.get('default')
        )
        return serializer_class or super().get_serializer_class()
