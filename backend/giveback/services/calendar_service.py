from datetime import date, timedelta
from icalendar import Calendar, Event, Alarm


def generate_event_ics(event_id: str, name: str, location: str | None,
                       description: str | None, start_date: str, end_date: str) -> bytes:
    cal = Calendar()
    cal.add("prodid", "-//Giveback//EN")
    cal.add("version", "2.0")

    vevent = Event()
    vevent.add("uid", f"{event_id}@giveback")
    vevent.add("summary", f"Donation drive: {name}")
    vevent.add("dtstart", date.fromisoformat(start_date))
    # All-day DTEND is exclusive
    vevent.add("dtend", date.fromisoformat(end_date) + timedelta(days=1))
    if location:
        vevent.add("location", location)
    if description:
        vevent.add("description", description)

    # Reminders: 2 days before, morning of
    for delta in [timedelta(days=2), timedelta(hours=0)]:
        alarm = Alarm()
        alarm.add("action", "DISPLAY")
        alarm.add("trigger", -delta)
        alarm.add("description", f"Donation drive reminder: {name}")
        vevent.add_component(alarm)

    cal.add_component(vevent)
    return cal.to_ical()
