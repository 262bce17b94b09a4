# ==================== SIGNUPS/VIEWS.PY ====================
from rest_framework import viewsets, status, permissions
from rest_framework.decorators import action
from rest_framework.response import Response

from pricing.config import get_policy
from pricing.policy import normalize_jurisdiction
from .serializers import WaitlistJoinSerializer, WaitlistEntrySerializer
from .services import join_waitlist, route_signup


class SignupViewSet(viewsets.ViewSet):
    """Regional beta gate: eligibility check and waitlist"""
    permission_classes = [permissions.AllowAny]

    @action(detail=False, methods=['get'])
    def eligibility(self, request):
        """Query: ?province=NS"""
        policy = get_policy()
        province = request.query_params.get('province')
        return Response({
            'gate_enabled': policy.gate_enabled,
            'allowed_province': policy.allowed_jurisdiction,
            'province': normalize_jurisdiction(province),
            'allowed': policy.is_allowed_for_signup(province),
            'route': route_signup(province, policy=policy),
        })

    @action(detail=False, methods=['post'])
    def waitlist(self, request):
        """Body: { "email": "driver@example.com", "province": "ON" }"""
        serializer = WaitlistJoinSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        entry, created = join_waitlist(
            serializer.validated_data['email'],
            serializer.validated_data.get('province'),
        )
        return Response(
            WaitlistEntrySerializer(entry).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK
        )
