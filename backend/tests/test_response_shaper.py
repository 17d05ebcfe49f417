from giveback.models import EventResponse, Request, User
from giveback.services.response_shaper import event_response_to_response, request_to_response
from giveback.utils.timestamps import humanize


AUTHOR = User(id="internal-author-id", username="alice", date_joined="2026-01-01T00:00:00.000000Z")


class TestHumanize:
    def test_afternoon(self):
        assert humanize("2026-10-19T15:04:05.123456Z") == "October 19th 2026, 3:04:05 pm"

    def test_midnight_and_ordinals(self):
        assert humanize("2026-03-01T00:00:09.000000Z") == "March 1st 2026, 12:00:09 am"
        assert humanize("2026-03-02T11:30:00.000000Z") == "March 2nd 2026, 11:30:00 am"
        assert humanize("2026-03-13T12:00:00.000000Z") == "March 13th 2026, 12:00:00 pm"
        assert humanize("2026-03-23T12:00:00.000000Z") == "March 23rd 2026, 12:00:00 pm"


class TestResponseShaper:
    def test_request_hides_author_id(self):
        request = Request(
            id="req-1",
            author_id=AUTHOR.id,
            contact="555-0100",
            description="need a size M coat",
            color="red",
            size="M",
            images=["https://img/1.jpg"],
            date_created="2026-10-19T15:04:05.000000Z",
        )
        request.author = AUTHOR

        shaped = request_to_response(request).model_dump()
        assert shaped["author"] == "alice"
        assert "internal-author-id" not in shaped.values()
        assert shaped["description"] == "need a size M coat"
        assert shaped["images"] == ["https://img/1.jpg"]
        assert shaped["date_created"] == "October 19th 2026, 3:04:05 pm"

    def test_event_response_fields(self):
        response = EventResponse(
            id="resp-1",
            author_id=AUTHOR.id,
            event_id="event-1",
            contact="donor@example.com",
            description="two coats",
            image_url="https://img/coat.jpg",
            date_created="2026-10-19T15:04:05.000000Z",
        )
        response.author = AUTHOR

        shaped = event_response_to_response(response).model_dump()
        assert set(shaped) == {"id", "author", "event_id", "contact", "description", "date_created"}
        assert shaped["author"] == "alice"
        assert shaped["event_id"] == "event-1"
