import argparse
import asyncio
import logging
import os
import sys

from core.app_context import AppContext
from core.config_loader import load_config
from core.models import FilterCriteria
from pipeline.controller import CareerPilotController
from pipeline.state import Outcome

# Configure logging
logging.basicConfig(
    level=os.environ.get('LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def print_leads(controller: CareerPilotController) -> None:
    jobs = controller.visible_jobs()
    print(f"\n{len(jobs)} of {len(controller.jobs)} leads match the filters:")
    for i, job in enumerate(jobs, 1):
        score = f"{job.match_score:.0f}%" if job.match_score is not None else "n/a"
        print(f"  {i}. [{score}] {job.title} @ {job.company} ({job.location})")
        if job.url:
            print(f"     {job.url}")


def print_activity(controller: CareerPilotController) -> None:
    print("\nActivity:")
    for line in controller.logs():
        print(f"  {line}")


async def run_scout(args, controller: CareerPilotController) -> Outcome:
    """Fill in the profile from the arguments and run one discovery."""
    controller.set_title(args.title)
    for skill in args.skill:
        controller.add_skill(skill)
    controller.set_filters(FilterCriteria(
        query=args.query,
        min_score=args.min_score,
        location=args.filter_location,
    ))
    return await controller.start_job_search(args.location)


def scout(args) -> int:
    config = load_config(args.config)
    context = AppContext.build(config)
    controller = context.new_controller()

    outcome = asyncio.run(run_scout(args, controller))
    if outcome == Outcome.SKIPPED:
        logger.error("Discovery needs a title and at least one skill")
    else:
        print_leads(controller)
    print_activity(controller)
    return 0 if outcome == Outcome.COMPLETED else 1


def serve(args) -> int:
    from web.backend.app import main as serve_api

    serve_api()
    return 0


def main():
    parser = argparse.ArgumentParser(description="Career Pilot - AI-assisted job search")
    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('serve', help='Run the HTTP API (host and port from config.yaml)')

    scout_parser = subparsers.add_parser('scout', help='Run one job discovery and print the leads')
    scout_parser.add_argument('--config', type=str, default='config.yaml',
                              help='Path to the configuration file')
    scout_parser.add_argument('--title', type=str, required=True,
                              help='Target job title')
    scout_parser.add_argument('--skill', type=str, action='append', default=[],
                              help='Skill to include in the profile (repeatable)')
    scout_parser.add_argument('--location', type=str, default=None,
                              help='Location to scout (default from config)')
    scout_parser.add_argument('--min-score', type=float, default=0,
                              help='Only show leads with at least this match score')
    scout_parser.add_argument('--query', type=str, default='',
                              help='Only show leads whose title or company contains this text')
    scout_parser.add_argument('--filter-location', type=str, default='',
                              help='Only show leads whose location contains this text')

    args = parser.parse_args()

    if args.command == 'serve':
        sys.exit(serve(args))
    sys.exit(scout(args))


if __name__ == "__main__":
    main()
