import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from client.form_collector import FormCollector, FormSubmissionError, TranscriptForm


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate a filled benchmark answer document for a student")
    parser.add_argument("--name", required=True, help="Student name")
    parser.add_argument("--gender", required=True, choices=["male", "female"])
    group = parser.add_mutually_exclusive_group(required=False)
    group.add_argument("--transcript", help="Interview transcript text")
    group.add_argument("--file", help="Path to a file containing the transcript")
    parser.add_argument("--url", default="http://localhost:8000", help="Server base URL")
    parser.add_argument("--out", default="downloads", help="Directory to save the document into")
    parser.add_argument("--show-answers", action="store_true",
                        help="Print the generated report JSON, even if filling the document fails")
    args = parser.parse_args(argv)

    if args.transcript:
        text = args.transcript
    elif args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            print(f"Failed to read file: {e}", file=sys.stderr)
            return 2
    else:
        text = sys.stdin.read()

    try:
        form = TranscriptForm(studentName=args.name, transcript=text, gender=args.gender)
    except ValidationError as e:
        for err in e.errors():
            field = ".".join(str(p) for p in err["loc"])
            print(f"{field}: {err['msg']}", file=sys.stderr)
        return 2

    with FormCollector(base_url=args.url) as collector:
        try:
            doc = collector.submit(form)
        except FormSubmissionError as e:
            if args.show_answers and e.answers is not None:
                print(json.dumps(e.answers, ensure_ascii=False, indent=2))
            print(f"Something went wrong: {e.message}", file=sys.stderr)
            return 1

    if args.show_answers:
        print(json.dumps(doc.answers, ensure_ascii=False, indent=2))

    path = doc.save(Path(args.out))
    print(f"{doc.filename} generated and saved to {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
