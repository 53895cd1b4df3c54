"""CLI entry point printing today's Hijri date, prayer times, and Qibla direction.

Set ADHAN_LATITUDE / ADHAN_LONGITUDE (or a .env file), then run:
    uv run python src/adhantimes/today.py
"""

from dotenv import load_dotenv

load_dotenv()

from adhantimes.config import configure_logging, load_settings  # noqa: E402
from adhantimes.hijri import convert_to_hijri, format_hijri, get_observances  # noqa: E402
from adhantimes.location import observer_now, observer_timezone, resolve_observer  # noqa: E402
from adhantimes.qibla import compute_qibla  # noqa: E402
from adhantimes.schedule import compute_solar_schedule, generate_schedule  # noqa: E402
from adhantimes.status import resolve_status  # noqa: E402


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)

    observer = resolve_observer(settings.latitude, settings.longitude)
    coordinate = observer.coordinate
    now = observer_now(coordinate)

    if settings.solar_times:
        schedule = compute_solar_schedule(
            coordinate, now.date(), observer_timezone(coordinate)
        )
    else:
        schedule = generate_schedule(coordinate, now.date())
    status = resolve_status(schedule, now)
    qibla = compute_qibla(coordinate)
    hijri = convert_to_hijri(now)

    print(f"{observer.label} ({coordinate.lat:.4f}, {coordinate.lng:.4f})")
    print(f"{now:%A %d %B %Y} · {format_hijri(hijri, settings.lang)}")
    for observance in get_observances(hijri.month_name, hijri.day):
        print(f"  ✦ {observance}")
    print()
    for event in schedule:
        marker = "→" if event.name == status.next else " "
        print(f"{marker} {event.name:<8} {event.clock_time}  {event.arabic_label}")
    print()
    print(f"Current: {status.current} · Next: {status.next} in {status.countdown}")
    print(f"Qibla: {qibla.bearing_deg:.0f}° · ~{qibla.distance_km:.0f} km (approx.)")


if __name__ == "__main__":
    main()
