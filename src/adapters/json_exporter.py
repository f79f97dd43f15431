"""Exportación JSON de la colección de perros.

Formato estable (indentado, claves ordenadas) para poder versionar o comparar
volcados del servidor.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import Dog


def export_dogs_json(*, dogs: list[Dog], output_path: Path) -> Path:
    """Exporta `dogs` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [dog.model_dump(mode="json") for dog in dogs]
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
