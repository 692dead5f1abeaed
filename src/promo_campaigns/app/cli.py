from __future__ import annotations

import argparse
import json

from promo_campaigns.app.factory import create_engine, parse_datetime
from promo_campaigns.app.serialization import campaign_to_dict, dismissal_state_to_dict
from promo_campaigns.application.engine import CampaignDecisionEngine
from promo_campaigns.observability.logging import configure_logging
from promo_campaigns.settings import Settings


def _status(engine: CampaignDecisionEngine) -> dict:
    return {
        "as_of": engine.clock.get_date().isoformat(),
        "campaign": campaign_to_dict(engine.active_campaign.value),
        "dismissal": dismissal_state_to_dict(engine.dismissal_state),
    }


def _catalog(engine: CampaignDecisionEngine) -> list[dict]:
    now = engine.clock.get_date()
    return [
        {**campaign_to_dict(definition), "is_active": definition.is_active(now)}
        for definition in engine.catalog
    ]


def main() -> None:
    configure_logging()
    parser = argparse.ArgumentParser(description="Promo campaign decision CLI")
    parser.add_argument("--as-of", dest="as_of", help="ISO-8601 timestamp to evaluate the schedule at")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("status", help="Show the active campaign and dismissal state")
    refresh_parser = subparsers.add_parser("refresh", help="Recompute the active campaign")
    refresh_parser.add_argument("--force-reset", action="store_true", dest="force_reset")
    subparsers.add_parser("dismiss", help="Dismiss the current banner")
    subparsers.add_parser("catalog", help="List catalog entries")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        return

    engine = create_engine(settings=Settings.from_env(), as_of=parse_datetime(args.as_of))

    if args.command == "refresh":
        engine.refresh(force_reset_dismissal=args.force_reset)
    elif args.command == "dismiss":
        engine.dismiss()

    output = _catalog(engine) if args.command == "catalog" else _status(engine)
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
