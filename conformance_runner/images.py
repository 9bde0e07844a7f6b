"""Default container images for a conformance run."""

from __future__ import annotations

from dataclasses import dataclass

from .config import ConfigStore
from .version import trim_version


CONFORMANCE_IMAGE_KEY = "conformance-image"
BUSYBOX_IMAGE_KEY = "busybox-image"

CONFORMANCE_IMAGE_REPO = "registry.k8s.io/conformance"
DEFAULT_BUSYBOX_IMAGE = "registry.k8s.io/e2e-test-images/busybox:1.36.1-1"


@dataclass(frozen=True)
class ImageSelection:
    conformance_image: str
    busybox_image: str


def conformance_image_for(server_version: str) -> str:
    return f"{CONFORMANCE_IMAGE_REPO}:{trim_version(server_version)}"


def resolve_images(store: ConfigStore, server_version: str) -> ImageSelection:
    """Fill in image defaults that the user did not set.

    The conformance image tag follows the cluster's server version, so a
    malformed version only fails the call when that image must be derived.
    """

    store.check_schema()

    conformance_image = store.get_string(CONFORMANCE_IMAGE_KEY)
    if not conformance_image:
        conformance_image = conformance_image_for(server_version)
        store.set(CONFORMANCE_IMAGE_KEY, conformance_image)

    busybox_image = store.get_string(BUSYBOX_IMAGE_KEY)
    if not busybox_image:
        busybox_image = DEFAULT_BUSYBOX_IMAGE
        store.set(BUSYBOX_IMAGE_KEY, busybox_image)

    return ImageSelection(
        conformance_image=conformance_image,
        busybox_image=busybox_image,
    )
