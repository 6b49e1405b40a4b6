import django.core.validators
import django.db.models.deletion
from django.db import migrations
from django.db import models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("packages", "0001_initial"),
        ("pages", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Box",
            fields=[
                (
                    "id",
                    models.AutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "identifier",
                    models.CharField(
                        db_index=True,
                        max_length=191,
                        validators=[
                            django.core.validators.RegexValidator("^[^\\s]+$"),
                        ],
                    ),
                ),
                (
                    "box_type",
                    models.CharField(
                        choices=[
                            ("system", "System"),
                            ("html", "HTML"),
                            ("text", "Text"),
                            ("tpl", "Template"),
                        ],
                        max_length=6,
                    ),
                ),
                (
                    "position",
                    models.CharField(
                        choices=[
                            ("bottom", "Bottom"),
                            ("contentBottom", "Below content"),
                            ("contentTop", "Above content"),
                            ("footer", "Footer"),
                            ("footerBoxes", "Footer boxes"),
                            ("headerBoxes", "Header boxes"),
                            ("hero", "Hero"),
                            ("sidebarLeft", "Left sidebar"),
                            ("sidebarRight", "Right sidebar"),
                            ("top", "Top"),
                        ],
                        max_length=20,
                    ),
                ),
                ("show_order", models.PositiveIntegerField(default=0)),
                ("visible_everywhere", models.BooleanField(default=True)),
                ("is_multilingual", models.BooleanField(default=False)),
                (
                    "css_class_name",
                    models.CharField(blank=True, default="", max_length=255),
                ),
                ("show_header", models.BooleanField(default=True)),
                (
                    "controller",
                    models.CharField(blank=True, default="", max_length=255),
                ),
                ("name", models.JSONField(blank=True, default=dict)),
                ("title", models.JSONField(blank=True, default=dict)),
                ("origin_is_system", models.BooleanField(default=False)),
                (
                    "package",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="boxes",
                        to="packages.package",
                    ),
                ),
            ],
        ),
        migrations.CreateModel(
            name="BoxToPage",
            fields=[
                (
                    "id",
                    models.AutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("visible", models.BooleanField(default=True)),
                (
                    "box",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        to="boxes.box",
                    ),
                ),
                (
                    "page",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        to="pages.page",
                    ),
                ),
            ],
        ),
        migrations.AddField(
            model_name="box",
            name="pages",
            field=models.ManyToManyField(
                related_name="boxes",
                through="boxes.BoxToPage",
                to="pages.page",
            ),
        ),
        migrations.CreateModel(
            name="BoxContent",
            fields=[
                (
                    "id",
                    models.AutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "language_code",
                    models.CharField(blank=True, default="", max_length=20),
                ),
                ("title", models.CharField(max_length=255)),
                ("content", models.TextField()),
                (
                    "box",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="contents",
                        to="boxes.box",
                    ),
                ),
            ],
        ),
        migrations.AddConstraint(
            model_name="box",
            constraint=models.UniqueConstraint(
                fields=("identifier", "package"),
                name="unique_box_identifier_per_package",
            ),
        ),
        migrations.AddConstraint(
            model_name="boxtopage",
            constraint=models.UniqueConstraint(
                fields=("box", "page"),
                name="unique_box_to_page",
            ),
        ),
        migrations.AddConstraint(
            model_name="boxcontent",
            constraint=models.UniqueConstraint(
                fields=("box", "language_code"),
                name="unique_box_content_language",
            ),
        ),
    ]
