import logging

from django.conf import settings
from django.core.management import BaseCommand
from django.core.management import CommandError

from importer.installer import PluginDoesNotExistError
from importer.installer import get_plugin
from importer.installer import process_manifest_stream
from packages.installation import PackageInstallation
from packages.models import Package

if settings.SENTRY_ENABLED:
    from sentry_sdk import capture_exception

logger = logging.getLogger(__name__)


def install_manifest(
    manifest_file: str,
    package_identifier: str,
    tag: str = "box",
    create_package: bool = False,
):
    plugin = get_plugin(tag)
    installation = PackageInstallation.for_identifier(
        package_identifier,
        create=create_package,
    )
    with open(manifest_file, "rb") as manifest:
        return process_manifest_stream(manifest, plugin, installation)


class Command(BaseCommand):
    help = "Install the items of an XML manifest on behalf of a package"

    def add_arguments(self, parser):
        parser.add_argument(
            "manifest_file",
            help="The XML manifest to be installed.",
            type=str,
        )
        parser.add_argument(
            "package",
            help="The identifier of the package the manifest belongs to.",
            type=str,
        )
        parser.add_argument(
            "-t",
            "--tag",
            help="The kind of item the manifest lists.",
            default="box",
            type=str,
        )
        parser.add_argument(
            "-c",
            "--create-package",
            help="Register the package if it is not known yet.",
            action="store_true",
        )

    def handle(self, *args, **options):
        try:
            batch = install_manifest(
                manifest_file=options["manifest_file"],
                package_identifier=options["package"],
                tag=options["tag"],
                create_package=options["create_package"],
            )
        except Package.DoesNotExist:
            raise CommandError(
                f'Package "{options["package"]}" not found. '
                "Use --create-package to register it.",
            )
        except PluginDoesNotExistError as e:
            raise CommandError(str(e.args[0]))
        except Exception as e:
            logger.exception("Installing %s failed", options["manifest_file"])
            if settings.SENTRY_ENABLED:
                capture_exception(e)
            raise CommandError(f"Installing {options['manifest_file']} failed: {e}") from e

        self.stdout.write(
            self.style.SUCCESS(
                f"Installed {len(batch.imported)} {options['tag']} item(s), "
                f"deleted {batch.deleted}, "
                f"{len(batch.visibility_exceptions)} with visibility exceptions.",
            ),
        )
