from rest_framework import serializers
from .models import WaitlistEntry


class WaitlistJoinSerializer(serializers.Serializer):
    email = serializers.EmailField()
    province = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=50)


class WaitlistEntrySerializer(serializers.ModelSerializer):
    class Meta:
        model = WaitlistEntry
        fields = ['id', 'email', 'jurisdiction', 'created_at']
        read_only_fields = fields
