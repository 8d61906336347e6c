import asyncio
import argparse
from environs import Env
import os

from impact_calc.logging_config import get_logger, setup_logging
from impact_calc.adapter import ImpactCalculatorAPI
from impact_calc.application.simulation import estimate_quick_impact, simulate_impact
from impact_calc.domain.constants import (
    DEFAULT_ANGLE_DEG,
    DEFAULT_DENSITY,
    OUTPUT_DATA_DIR,
)
from impact_calc.domain.exceptions import APIException, LocationNotFound
from impact_calc.domain.models.impact import ImpactSimulationInput, TargetType
from impact_calc.domain.models.location import ImpactLocation
from impact_calc.infrastructure.output.formatters import (
    ConsoleOutputFormatter,
    JSONOutputFormatter,
)

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Asteroid Impact Calculator")
    parser.add_argument("--diameter", type=float, default=200.0, help="Asteroid diameter in meters")
    parser.add_argument("--speed", type=float, default=20.0, help="Impact speed in km/s")
    parser.add_argument("--angle", type=float, default=DEFAULT_ANGLE_DEG, help="Entry angle from horizontal in degrees")
    parser.add_argument("--density", type=float, default=DEFAULT_DENSITY, help="Bulk density in kg/m³")
    target_group = parser.add_mutually_exclusive_group()
    target_group.add_argument(
        "--target",
        type=str,
        choices=[t.value for t in TargetType],
        default=None,
        help="Terrain at the impact point (default: land)",
    )
    target_group.add_argument(
        "--location",
        type=str,
        default=None,
        help="Preset location name or a place to geocode",
    )
    parser.add_argument(
        "--distance-ld",
        type=float,
        default=None,
        help="Current distance in lunar distances; adds the impact timeline",
    )
    parser.add_argument(
        "--featured",
        action="store_true",
        help="Use this week's featured near-Earth object instead of --diameter/--speed",
    )
    parser.add_argument(
        "--save-json",
        action="store_true",
        help="Save JSON output to a file in the output_data directory",
    )
    return parser


async def resolve_location(facade: ImpactCalculatorAPI, query: str) -> ImpactLocation:
    location = await facade.locate(query)
    if location is None:
        raise LocationNotFound(f"Could not find a place called {query!r}")
    logger.info(f"Impact location: {location}")
    return location


async def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    env = Env()
    env.read_env(".env")
    setup_logging(env)

    facade = ImpactCalculatorAPI.create_from_env(env)
    output_dir = env.path("OUTPUT_DATA_DIR", OUTPUT_DATA_DIR)

    try:
        location = None
        target = TargetType.coerce(args.target) if args.target else TargetType.LAND
        if args.location:
            location = await resolve_location(facade, args.location)
            target = location.terrain

        diameter_m, speed_km_s = args.diameter, args.speed
        if args.featured:
            neo = await facade.featured_asteroid()
            if neo is None:
                print("No near-Earth objects in this week's feed.")
                return 1
            print(
                f"☄️  Featured object: {neo.name} "
                f"({neo.diameter_min_m:.0f}-{neo.diameter_max_m:.0f} m, "
                f"{neo.velocity_km_s:.2f} km/s, "
                f"{'hazardous' if neo.is_hazardous else 'non-hazardous'})"
            )
            diameter_m, speed_km_s = neo.mean_diameter_m, neo.velocity_km_s

        params = ImpactSimulationInput.from_slider(
            diameter_m, speed_km_s, args.angle, target, args.density
        )
        result = simulate_impact(params)
        quick = estimate_quick_impact(diameter_m, speed_km_s, args.angle, args.density)
        timeline = (
            facade.timeline(speed_km_s, args.distance_ld)
            if args.distance_ld is not None
            else None
        )

        if args.save_json:
            json_output = JSONOutputFormatter().format_result(
                result, params, quick, location, timeline
            )
            os.makedirs(output_dir, exist_ok=True)
            file_path = os.path.join(output_dir, "impact.json")
            with open(file_path, "w", encoding="utf-8") as f:
                f.write(json_output)
            print(f"✅ JSON output saved to {file_path}")
        else:
            ConsoleOutputFormatter().format_result(result, params, quick, location, timeline)
        return 0

    except (ValueError, LocationNotFound) as e:
        print(f"Error: {e}")
    except APIException as e:
        print(
            f"API Error: {e}\nPlease check NASA_API_KEY in your .env file and your network connection."
        )
    return 1


def run() -> None:
    raise SystemExit(asyncio.run(main()))


if __name__ == "__main__":
    run()
