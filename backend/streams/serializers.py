"""Serializers used by the API views."""
from rest_framework import serializers


class DatasetSummarySerializer(serializers.Serializer):
    """
    Shape of one entry in `/api/summary/`.

    The statistics fields are left out for a dataset that could not
    be read; `error` says why.
    """

    key = serializers.CharField()
    filename = serializers.CharField()
    label_column = serializers.CharField()
    row_count = serializers.IntegerField(required=False)
    total_streams = serializers.FloatField(required=False)
    malformed_count = serializers.IntegerField(required=False)
    top_label = serializers.CharField(required=False, allow_null=True)
    error = serializers.CharField(required=False)
