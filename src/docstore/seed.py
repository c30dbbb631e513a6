"""Read Document values from a YAML or JSON seed file"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from docstore.models import Document


def load_documents(path: Path) -> list[Document]:
    """Parse a list of documents, or a mapping with a 'documents' list.

    YAML is a superset of JSON, so both are read with yaml.safe_load.
    Raises ValueError if the file is unreadable or does not hold documents.
    """
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"Cannot read {path}: {e}") from e

    if isinstance(data, dict):
        if "documents" not in data:
            raise ValueError(f"{path}: expected a list of documents")
        data = data["documents"]
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of documents")

    try:
        return [Document.model_validate(item) for item in data]
    except ValidationError as e:
        raise ValueError(f"{path}: {e}") from e
