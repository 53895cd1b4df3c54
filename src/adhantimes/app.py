"""Adhan Times — Streamlit app for prayer times, Qibla direction, and the Hijri date."""

import datetime
import html

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import get_geolocation, streamlit_js_eval

load_dotenv()

from adhantimes.config import configure_logging, load_settings  # noqa: E402
from adhantimes.hijri import convert_to_hijri, format_hijri, get_observances  # noqa: E402
from adhantimes.i18n import t  # noqa: E402
from adhantimes.location import (  # noqa: E402
    GeocodingError,
    ObserverLocation,
    geocode_address,
    observer_now,
    observer_timezone,
    resolve_observer,
)
from adhantimes.notifications import NotificationScheduler  # noqa: E402
from adhantimes.qibla import compute_qibla, heading_from_alpha  # noqa: E402
from adhantimes.renderers.compass import render_compass  # noqa: E402
from adhantimes.schedule import compute_solar_schedule, generate_schedule  # noqa: E402
from adhantimes.status import resolve_status  # noqa: E402

_settings = load_settings()
configure_logging(_settings.log_level)

# --- Language detection (browser-first via streamlit-js-eval) ---
# navigator.language is read once and cached in session_state.
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = (
            "ar" if _browser_lang.lower().startswith("ar") else _settings.lang
        )

_lang: str = st.session_state.get("lang", _settings.lang)

# First DeviceOrientation alpha (degrees, counter-clockwise from north), or -1
# when the device reports nothing within 3 seconds.
_READ_ALPHA_JS = """
new Promise((resolve) => {
  if (!("DeviceOrientationEvent" in window)) { resolve(-1); return; }
  const onOrientation = (event) => {
    if (event.alpha === null) return;
    window.removeEventListener("deviceorientation", onOrientation);
    resolve(event.alpha);
  };
  window.addEventListener("deviceorientation", onOrientation);
  setTimeout(() => {
    window.removeEventListener("deviceorientation", onOrientation);
    resolve(-1);
  }, 3000);
})
"""

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="🕌",
    layout="centered",
    initial_sidebar_state="collapsed",
)

# --- Session state initialization ---

if "observer" not in st.session_state:
    st.session_state.observer = None
if "error_msg" not in st.session_state:
    st.session_state.error_msg = None
if "alerts" not in st.session_state:
    st.session_state.alerts = []
if "notifier" not in st.session_state:
    _alerts: list[str] = st.session_state.alerts

    def _queue_alert(title: str, body: str) -> None:
        _alerts.append(f"{title} — {body}")

    def _observer_clock() -> datetime.datetime:
        # Timers fire in the observer's timezone, not the server's.
        location = st.session_state.get("observer") or resolve_observer(None, None)
        return observer_now(location.coordinate)

    st.session_state.notifier = NotificationScheduler(_queue_alert, clock=_observer_clock)
if "heading" not in st.session_state:
    st.session_state.heading = 0.0
if "calibrations" not in st.session_state:
    st.session_state.calibrations = 0  # one streamlit_js_eval key per button press
    st.session_state.calibrating = False

st.markdown(
    """
    <style>
    iframe[src*="streamlit_js_eval"] { display: none !important; }
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #0d1b35 !important;
        color: #e8d5a3;
    }
    [data-testid="stHeader"], [data-testid="stToolbar"] { display: none !important; }
    .status-box {
        border: 1px solid rgba(201,169,110,0.35);
        border-radius: 12px;
        padding: 1rem 1.4rem;
        display: flex;
        justify-content: space-between;
        margin-bottom: 0.8rem;
    }
    .prayer-row {
        display: flex;
        justify-content: space-between;
        padding: 0.6rem 1rem;
        border-radius: 8px;
        margin-bottom: 0.3rem;
        border: 1px solid rgba(255,255,255,0.06);
    }
    .prayer-row.current { background: rgba(201,169,110,0.85); color: #0d1b35; }
    .prayer-row.next { background: rgba(126,200,227,0.12); border-color: #7ec8e3; }
    .muted { color: #aaaaaa; font-size: 0.85rem; }
    .big { font-size: 1.6rem; font-weight: 700; }
    .hijri { text-align: center; font-size: 1.5rem; font-weight: 700; }
    </style>
    """,
    unsafe_allow_html=True,
)


# --- Location (fixed from settings, else browser geolocation, else Kaaba) ---


def _observer_from_browser() -> ObserverLocation | None:
    if _settings.latitude is not None or _settings.longitude is not None:
        return resolve_observer(_settings.latitude, _settings.longitude)
    position = get_geolocation()
    if position is None:
        return None  # JS hasn't returned yet
    coords = position.get("coords") or {}
    return resolve_observer(coords.get("latitude"), coords.get("longitude"))


if st.session_state.observer is None:
    st.session_state.observer = _observer_from_browser()

observer: ObserverLocation = st.session_state.observer or resolve_observer(None, None)


def _schedule_for(location: ObserverLocation, day: datetime.date):
    if _settings.solar_times:
        return compute_solar_schedule(
            location.coordinate, day, observer_timezone(location.coordinate)
        )
    return generate_schedule(location.coordinate, day)


st.markdown(f"<p class='muted'>📍 {html.escape(observer.label)}</p>", unsafe_allow_html=True)
if observer.is_fallback and st.session_state.observer is not None:
    st.caption(t("fallback_notice", _lang))

col1, col2 = st.columns([4, 1])
with col1:
    address = st.text_input(t("label_address", _lang), key="address")
with col2:
    st.markdown("<div style='height:1.9rem'></div>", unsafe_allow_html=True)
    searched = st.button(t("btn_search", _lang), use_container_width=True)

if searched and address:
    st.session_state.error_msg = None
    try:
        st.session_state.observer = geocode_address(address)
    except GeocodingError as e:
        st.session_state.error_msg = t("error_address", _lang, error=e)
    st.rerun()

if st.session_state.error_msg:
    st.error(st.session_state.error_msg)

tab_prayers, tab_qibla, tab_calendar = st.tabs(
    [t("tab_prayers", _lang), t("tab_qibla", _lang), t("tab_calendar", _lang)]
)


@st.fragment(run_every=1)
def _prayer_panel() -> None:
    now = observer_now(observer.coordinate)
    schedule = _schedule_for(observer, now.date())
    status = resolve_status(schedule, now)

    while st.session_state.alerts:
        st.toast(st.session_state.alerts.pop(0))

    st.markdown(
        f"""
        <div class='status-box'>
          <div><div class='muted'>{t("label_current", _lang)}</div>
               <div class='big'>{status.current}</div></div>
          <div style='text-align:right'><div class='muted'>{t("label_next", _lang)}</div>
               <div>{status.next}</div>
               <div class='muted'>{t("label_in", _lang, countdown=status.countdown)}</div></div>
        </div>
        """,
        unsafe_allow_html=True,
    )
    for event in schedule:
        css = "current" if event.name == status.current else ""
        css = "next" if event.name == status.next else css
        badge = f" · {t('badge_next', _lang)}" if event.name == status.next else ""
        st.markdown(
            f"<div class='prayer-row {css}'><span><b>{event.name}</b> "
            f"<span class='muted'>{event.arabic_label}</span></span>"
            f"<span>{event.clock_time}{badge}</span></div>",
            unsafe_allow_html=True,
        )


@st.fragment(run_every=60)
def _calendar_panel() -> None:
    now = observer_now(observer.coordinate)
    hijri = convert_to_hijri(now)
    st.markdown(f"<div class='hijri'>{format_hijri(hijri, 'en')}</div>", unsafe_allow_html=True)
    st.markdown(
        f"<div class='hijri' style='font-size:1.2rem'>{format_hijri(hijri, 'ar')}</div>",
        unsafe_allow_html=True,
    )
    st.markdown(
        f"<p class='muted' style='text-align:center'>{now:%A, %B %d, %Y} · {now:%I:%M %p}</p>",
        unsafe_allow_html=True,
    )
    events = get_observances(hijri.month_name, hijri.day)
    if events:
        st.subheader(t("label_significance", _lang))
        for event in events:
            st.markdown(f"- {event}")
    st.caption(t("label_month", _lang, month=hijri.month_name))


with tab_prayers:
    _prayer_panel()
    if st.button(t("btn_notify", _lang)):
        today = observer_now(observer.coordinate).date()
        names = st.session_state.notifier.reschedule(_schedule_for(observer, today))
        st.caption(t("notify_scheduled", _lang, names=", ".join(names) or "—"))

with tab_qibla:
    qibla = compute_qibla(observer.coordinate)
    if st.button(t("btn_calibrate", _lang)):
        st.session_state.calibrations += 1
        st.session_state.calibrating = True
    if st.session_state.calibrating:
        # -1 from JS means no orientation sensor answered; None means not returned yet.
        _alpha = streamlit_js_eval(
            js_expressions=_READ_ALPHA_JS,
            key=f"_alpha_{st.session_state.calibrations}",
            height=0,
        )
        if _alpha is not None:
            if float(_alpha) < 0:
                st.caption(t("no_sensor", _lang))
            else:
                st.session_state.heading = float(round(heading_from_alpha(float(_alpha))) % 360)
            st.session_state.calibrating = False
    # Manual entry stays available for devices without a compass.
    heading = st.number_input(
        t("label_heading", _lang), min_value=0.0, max_value=359.0, step=1.0, key="heading"
    )
    st.plotly_chart(
        render_compass(qibla, heading),
        use_container_width=False,
        config={"displayModeBar": False},
    )
    st.markdown(t("label_direction", _lang, bearing=round(qibla.bearing_deg)))
    if qibla.distance_km > 0:
        st.markdown(t("label_distance", _lang, distance=round(qibla.distance_km)))
    st.caption(t("how_to_use", _lang))

with tab_calendar:
    _calendar_panel()
