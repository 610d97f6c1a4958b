# appcast_scout/report/json_report.py

"""
JSON report generation for AppcastScout.

Serializes a ScanReport object to a file.
"""
import json
from pathlib import Path

from appcast_scout.aggregator import ScanReport


def render_json(report: ScanReport, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Save *report* as JSON at *output_path*.

    :param report: ScanReport with the scan results
    :param output_path: path of the JSON file
    :param pretty: indent the output by 2 spaces
    :return: Path of the saved file

    Example:
    ```python
    from appcast_scout.report.json_report import render_json
    report_path = render_json(report, 'reports/appcasts.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    data = {"files": report.files}

    with output.open('w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2 if pretty else None)

    return output
