import json
import logging
import os
import sys
from pathlib import Path

from lagna.services.chart import compute_chart
from lagna.services.errors import ChartError, ValidationFailed
from lagna.services.models import BirthInput


def load_birth_input(path: Path) -> BirthInput:
    data = json.loads(path.read_text(encoding="utf-8"))
    return BirthInput(
        civil_date=data.get("date"),
        civil_time=data.get("time"),
        latitude_deg=data.get("lat"),
        longitude_deg=data.get("lon"),
        utc_offset_hours=data.get("tz"),
    )


def main(argv: list[str]) -> int:
    if len(argv) < 2:
        print("Usage: python cli.py input.json [output.json]")
        return 1

    try:
        chart = compute_chart(load_birth_input(Path(argv[1])))
    except ValidationFailed as exc:
        for v in exc.violations:
            print(f"{v.field}: {v.message}", file=sys.stderr)
        return 1
    except ChartError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    output = json.dumps(chart.to_dict(), indent=2, ensure_ascii=False)
    if len(argv) > 2:
        out_path = Path(argv[2])
        out_path.write_text(output, encoding="utf-8")
        print(f"Wrote chart JSON → {out_path}")
    else:
        print(output)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING").upper())
    sys.exit(main(sys.argv))
