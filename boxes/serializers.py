from rest_framework import serializers

from boxes import models
from boxes import validators


class BoxContentSerializer(serializers.ModelSerializer):
    language_code = serializers.CharField(max_length=20, allow_blank=True)

    class Meta:
        model = models.BoxContent
        fields = [
            "language_code",
            "title",
            "content",
        ]


class BoxSerializer(serializers.ModelSerializer):
    identifier = serializers.CharField(
        max_length=191,
        validators=[validators.box_identifier_validator],
    )

    class Meta:
        model = models.Box
        fields = [
            "id",
            "identifier",
            "box_type",
            "position",
            "show_order",
            "visible_everywhere",
            "is_multilingual",
            "css_class_name",
            "show_header",
            "controller",
            "name",
            "title",
            "origin_is_system",
        ]
        read_only_fields = ["id"]

    def validate(self, data):
        box_type = data.get("box_type", getattr(self.instance, "box_type", None))
        controller = data.get("controller", getattr(self.instance, "controller", ""))

        if box_type == validators.BoxType.SYSTEM and not controller:
            raise serializers.ValidationError(
                {"controller": "A controller is required for system boxes."},
            )
        if box_type != validators.BoxType.SYSTEM and controller:
            raise serializers.ValidationError(
                {"controller": "Only system boxes may have a controller."},
            )

        return data
