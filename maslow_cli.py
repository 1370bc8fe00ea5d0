"""
Maslow: command-line access to needs in the Publishing API.

Usage:
    maslow list                                   # First page of needs
    maslow list --organisation-id <uuid> --page 2
    maslow list --q "passport"                    # Full-text filter
    maslow show <content_id>                      # One need
    maslow revisions <content_id>                 # History with field diffs
    maslow validate <content_id>                  # Run validation rules
    maslow publish <content_id>
    maslow unpublish <content_id> --explanation "Merged into another need"
    maslow discard <content_id>                   # Drop the current draft

Pass --json before the command for machine-readable output.  Connection settings
come from PUBLISHING_API_URL / PUBLISHING_API_BEARER_TOKEN (see
utils/config.py).
"""

import argparse
import json
import logging
import sys

from needs import InvalidNeed, Need, NotFound
from publishing_api.errors import HTTPErrorResponse, HTTPNotFound
from utils.config import AppConfig
from utils.log import configure_logging
from utils.strings import normalize_whitespace

logger = logging.getLogger("maslow")


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, default=str))


def _need_summary(need: Need) -> dict:
    return {
        "content_id": need.content_id,
        "need_id": need.need_id,
        "role": need.role,
        "goal": need.goal,
        "benefit": need.benefit,
        "publication_state": need.publication_state,
    }


def cmd_list(args, config: AppConfig) -> int:
    options = {"per_page": args.per_page or config.needs_per_page}
    if args.organisation_id:
        options["link_organisations"] = args.organisation_id
    if args.page:
        options["page"] = args.page
    if args.q:
        options["q"] = args.q
    needs = Need.list(**options)

    if args.json:
        _print_json({
            **needs.pagination(),
            "results": [_need_summary(n) for n in needs],
        })
        return 0

    for need in needs:
        story = normalize_whitespace(f"{need.role} / {need.goal} / {need.benefit}")
        print(f"{need.content_id}  {need.publication_state or '-':<11}  {story}")
    print(f"\nPage {needs.current_page} of {needs.pages} ({needs.total} needs)")
    return 0


def cmd_show(args, config: AppConfig) -> int:
    need = Need.find(args.content_id)
    if args.json:
        _print_json(need.to_dict())
        return 0
    print(f"As a {need.role}")
    print(f"I need to {need.goal}")
    print(f"So that {need.benefit}")
    print()
    print(f"Status:         {need.status}")
    if need.impact:
        print(f"Impact:         {need.impact}")
    for justification in need.justifications:
        print(f"Justification:  {justification}")
    for criterion in need.met_when:
        print(f"Met when:       {criterion}")
    for organisation in need.organisations():
        print(f"Organisation:   {organisation.label()}")
    return 0


def cmd_revisions(args, config: AppConfig) -> int:
    need = Need(content_id=args.content_id)
    try:
        revisions = need.revisions()
    except HTTPNotFound as err:
        raise NotFound(args.content_id) from err
    if args.json:
        _print_json(revisions)
        return 0
    for revision in revisions:
        print(f"Version {revision.get('user_facing_version')}  "
              f"({revision.get('publication_state')}, {revision.get('updated_at')})")
        for field, (before, after) in revision["changes"].items():
            print(f"  {field}: {before!r} -> {after!r}")
    return 0


def cmd_validate(args, config: AppConfig) -> int:
    need = Need.find(args.content_id)
    result = need.validate()
    if args.json:
        _print_json(result.to_dict())
    else:
        print(result.summary_text())
    return 0 if result.is_valid() else 1


def _report(result, args, done_message: str) -> int:
    if args.json:
        _print_json({
            "ok": result.ok,
            "operation": result.operation,
            "error": str(result.error) if result.error else None,
        })
    elif result:
        print(done_message)
    else:
        print(f"Failed: {result.error}", file=sys.stderr)
    return 0 if result else 1


def cmd_publish(args, config: AppConfig) -> int:
    need = Need.find(args.content_id)
    return _report(need.publish(), args, f"Published {need.content_id}")


def cmd_unpublish(args, config: AppConfig) -> int:
    need = Need.find(args.content_id)
    return _report(need.unpublish(args.explanation), args, f"Withdrew {need.content_id}")


def cmd_discard(args, config: AppConfig) -> int:
    need = Need(content_id=args.content_id)
    return _report(need.discard(), args, f"Discarded draft of {need.content_id}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maslow",
        description="Manage needs stored in the Publishing API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--json", action="store_true",
                        help="Emit JSON instead of text")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Override MASLOW_LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("list", help="List needs")
    p.add_argument("--organisation-id", default=None,
                   help="Only needs linked to this organisation content id")
    p.add_argument("--page", type=int, default=None, help="Page number (1-based)")
    p.add_argument("--per-page", type=int, default=None, help="Needs per page")
    p.add_argument("--q", default=None, help="Search text")
    p.set_defaults(func=cmd_list)

    for name, func, help_text in (
        ("show", cmd_show, "Show one need"),
        ("revisions", cmd_revisions, "Show revision history with changes"),
        ("validate", cmd_validate, "Validate a stored need"),
        ("publish", cmd_publish, "Publish the current draft"),
        ("discard", cmd_discard, "Discard the current draft"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("content_id")
        p.set_defaults(func=func)

    p = sub.add_parser("unpublish", help="Withdraw a published need")
    p.add_argument("content_id")
    p.add_argument("--explanation", required=True,
                   help="Reason shown to visitors of the withdrawn need")
    p.set_defaults(func=cmd_unpublish)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = AppConfig.from_env()
    configure_logging(config, level=args.log_level)

    try:
        return args.func(args, config)
    except (NotFound, InvalidNeed) as e:
        print(str(e), file=sys.stderr)
        return 1
    except HTTPErrorResponse as e:
        logger.error("Publishing API request failed: %s", e)
        print(f"Publishing API error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
