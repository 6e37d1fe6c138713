"""
Output writers (CSV and JSON).
"""

import io
import json
import csv
from pathlib import Path
from datetime import datetime, timezone
from typing import List, Dict, Any, Optional, Sequence
from collections import Counter

from .models import ContactRecord, CONTACT_FIELDS


CSV_HEADERS = ['Name', 'Title', 'Company', 'Email', 'Phone', 'Website', 'Address']


def contacts_to_csv(contacts: Sequence[ContactRecord]) -> str:
    """
    Render contacts as CSV text.

    The header row is plain; every data cell is double-quoted with inner
    quotes doubled. Rows are separated by a single newline.

    Args:
        contacts: Contacts to render

    Returns:
        CSV document as a string
    """
    buffer = io.StringIO()

    header_writer = csv.writer(buffer, lineterminator='\n')
    header_writer.writerow(CSV_HEADERS)

    row_writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator='\n')
    for contact in contacts:
        row_writer.writerow([contact.field_value(name) for name in CONTACT_FIELDS])

    return buffer.getvalue().rstrip('\n')


def calculate_field_stats(contacts: Sequence[ContactRecord]) -> Dict[str, Any]:
    """
    Calculate field coverage and company distribution.

    Args:
        contacts: List of ContactRecord objects

    Returns:
        Field statistics dictionary
    """
    total = len(contacts)

    coverage = {}
    for name in CONTACT_FIELDS:
        count = sum(1 for c in contacts if c.field_value(name))
        coverage[name] = {
            "count": count,
            "percentage": f"{(count / total * 100):.1f}" if total > 0 else "0.0"
        }

    company_counts = Counter(c.company for c in contacts if c.company)
    top_companies = [
        {"company": company, "count": count}
        for company, count in company_counts.most_common(10)
    ]

    return {
        "fieldCoverage": coverage,
        "completeRecords": sum(1 for c in contacts if c.is_complete),
        "uniqueCompanies": len(company_counts),
        "topCompanies": top_companies
    }


def _output_path(output_dir: str, prefix: str, extension: str, filename: Optional[str]) -> Path:
    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    if not filename:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H-%M-%S-%f")[:-3] + "Z"
        filename = f"{prefix}-{timestamp}.{extension}"

    return out_dir / filename


def write_csv(
    contacts: Sequence[ContactRecord],
    output_dir: str = "output",
    prefix: str = "contacts",
    filename: Optional[str] = None
) -> str:
    """
    Write contacts to CSV file.

    Args:
        contacts: List of ContactRecord objects
        output_dir: Output directory
        prefix: Filename prefix for timestamped names
        filename: Exact file name, overrides the timestamped one

    Returns:
        Path to output file
    """
    output_path = _output_path(output_dir, prefix, "csv", filename)

    with open(output_path, 'w', newline='', encoding='utf-8') as f:
        f.write(contacts_to_csv(contacts))

    return str(output_path)


def write_json(
    contacts: Sequence[ContactRecord],
    sources: List[str],
    output_dir: str = "output",
    prefix: str = "contacts",
    filename: Optional[str] = None
) -> str:
    """
    Write contacts to JSON file.

    Args:
        contacts: List of ContactRecord objects
        sources: Input file names the contacts came from
        output_dir: Output directory
        prefix: Filename prefix for timestamped names
        filename: Exact file name, overrides the timestamped one

    Returns:
        Path to output file
    """
    output_path = _output_path(output_dir, prefix, "json", filename)

    output = {
        "metadata": {
            "exportedAt": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
            "sources": sources,
            "totalContacts": len(contacts),
            "fieldStats": calculate_field_stats(contacts)
        },
        "contacts": [contact.to_dict() for contact in contacts]
    }

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(output, f, indent=2, ensure_ascii=False)

    return str(output_path)
