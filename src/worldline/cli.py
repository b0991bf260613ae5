"""CLI entry point for worldline summaries.

    uv run worldline 1990-06-15 --lat 40
    uv run worldline 1990-06-15 --lat -33.9 --target 2020-01-01 --reference local-group --lang pt
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from worldline.compute import run  # noqa: E402
from worldline.config import ConfigError, load_settings  # noqa: E402
from worldline.dates import InvalidDateError, breakdown_duration, format_duration  # noqa: E402
from worldline.i18n import t  # noqa: E402
from worldline.models import CMBReference, WorldlineQuery, WorldlineState  # noqa: E402
from worldline.units import format_distance, format_speed  # noqa: E402
from worldline.wgs84 import InvalidLatitudeError  # noqa: E402

logger = logging.getLogger(__name__)


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="worldline",
        description="How fast and how far you have moved through four reference frames.",
    )
    p.add_argument("birth", help='Birth date "YYYY-MM-DD" or ISO timestamp')
    p.add_argument("--lat", type=float, required=True, help="Latitude in degrees")
    p.add_argument("--target", default=None, help="Target date (default: now)")
    p.add_argument(
        "--reference",
        choices=[r.value for r in CMBReference],
        default=None,
        help="CMB reference body (default: WORLDLINE_CMB_REFERENCE or ssb)",
    )
    p.add_argument("--lang", default=None, help="Output language (default: WORLDLINE_LOCALE)")
    return p


def render_summary(state: WorldlineState, lang: str) -> str:
    """Plain-text summary of a WorldlineState."""
    age = breakdown_duration(state.duration_seconds)
    lines = [f"{t('label_age', lang)}: {format_duration(age)}"]
    if age.is_pre_birth:
        lines.append(t("label_pre_birth", lang))

    velocities = state.frames
    for velocity, distance in zip(
        (velocities.spin, velocities.orbit, velocities.galaxy, velocities.cmb),
        state.distances,
    ):
        line = (
            f"{t('frame_' + velocity.frame.value, lang)}: "
            f"{format_speed(velocity.velocity_kms, lang=lang)}, "
            f"{format_distance(distance.path_length_km, lang).formatted}"
        )
        if velocity.has_significant_uncertainty:
            line += " " + t("label_uncertain", lang).format(sigma=velocity.uncertainty_kms)
        lines.append(line)

    total = format_distance(state.total_path_length_km(), lang).formatted
    lines.append(f"{t('label_total', lang)}: {total}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    lang = args.lang or settings.locale
    reference = CMBReference(args.reference) if args.reference else settings.cmb_reference

    query = WorldlineQuery(
        birth=args.birth,
        latitude_deg=args.lat,
        target=args.target,
        reference=reference,
    )
    try:
        state = run(query, settings)
    except (InvalidDateError, InvalidLatitudeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logger.info("Computed worldline for %s at lat %s", args.birth, args.lat)
    print(render_summary(state, lang))
    return 0


if __name__ == "__main__":
    sys.exit(main())
