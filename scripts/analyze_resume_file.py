from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.analysis import analyze_resume, missing_industry_keywords, summarize_metrics  # noqa: E402
from app.core.reference_config import get_reference_data, load_reference_file  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Score a resume JSON export without calling any AI service.")
    parser.add_argument("path", help="Resume JSON file (personalInfo, experiences, education, skills)")
    parser.add_argument("--industry", default="general", help="Industry tag, e.g. technology")
    parser.add_argument("--reference", default=None, help="Optional YAML file with custom keyword tables")
    parser.add_argument("--out", default=None, help="Write the report here instead of stdout")
    args = parser.parse_args()

    resume_data = json.loads(Path(args.path).read_text(encoding="utf-8"))
    reference = load_reference_file(args.reference) if args.reference else get_reference_data()

    result = analyze_resume(resume_data, args.industry, reference)
    report = {
        "industry": args.industry,
        "analysis": result.model_dump(mode="json", by_alias=True),
        "nlpMetrics": summarize_metrics(result).model_dump(by_alias=True),
        "missingKeywords": missing_industry_keywords(result, args.industry, reference),
    }
    rendered = json.dumps(report, indent=2, ensure_ascii=False)

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(rendered + "\n", encoding="utf-8")
    else:
        print(rendered)


if __name__ == "__main__":
    main()
