"""
zkWasm Hub Image Check

Verifies the WASM image has been published to the hub catalog.
"""

from typing import Any, Dict, List

from ...hub import HubClient, HubError
from ..models import CheckOutcome


def check_hub_image(info: Dict[str, Any], client: HubClient) -> CheckOutcome:
    """
    Look up the image on the zkWasm hub by its MD5 digest.

    Args:
        info: Info gathered by earlier checks (needs ``md5_hash``)
        client: Hub client used for the lookup

    Returns:
        Outcome with ``image_hash`` and ``image_checksum`` when found
    """
    image_hash = info.get("md5_hash")

    if not image_hash:
        return CheckOutcome(errors=["No WASM MD5 hash available for image check"])

    try:
        record = client.query_image(image_hash)
    except HubError as e:
        return CheckOutcome(
            errors=[f"Failed to check zkWasm hub: {e}"],
            details=[f"Error querying zkWasm hub: {e}"],
        )

    if record is None or not record.has_checksum:
        return CheckOutcome(
            errors=[
                f"Image not found: {image_hash}. Please publish the image first "
                f"using the publish.sh script in your local environment or use "
                f"zkwasm publish command."
            ],
            details=[f"Image {image_hash} not found on zkWasm hub"],
        )

    found: Dict[str, Any] = {
        "image_hash": image_hash,
        "image_checksum": str(record.checksum),
    }
    details: List[str] = [
        f"Image found on zkWasm hub: {image_hash}",
        f"Image checksum: {record.checksum}",
    ]

    if record.name:
        found["image_name"] = record.name
        details.append(f"Image name: {record.name}")
    if record.circuit_size:
        found["circuit_size"] = record.circuit_size
        details.append(f"Circuit size: {record.circuit_size}")

    return CheckOutcome(info=found, details=details)
