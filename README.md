# classbooking

A small HTTP service for creating classes (yoga, spin, and so on) and booking
members into them on a given date. All data is kept in memory and is lost
when the process stops.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Configuration

The service reads a JSON configuration file with these keys. Key names are
matched case-insensitively.

```json
{
  "DateFormat": "2006-01-02",
  "BaseRoute": "/api",
  "Port": "8080"
}
```

- `DateFormat` is the layout that dates in requests must follow. You write
  the layout with the reference moment `Mon Jan 2 15:04:05 -0700 2006`, so
  `2006-01-02` means dates such as `2025-06-01`. The recognised elements are
  `2006`, `06`, `January`, `Jan`, `Monday`, `Mon`, `01`, `1`, `02`, `2`, `_2`,
  `15`, `03`, `3`, `04`, `4`, `05`, `5`, `PM`, `pm`, `-0700`, `-07:00`, `-07`,
  `Z0700` and `Z07:00`. Any other text must appear literally. If the layout
  has no zone element, dates are taken as UTC.
- `BaseRoute` is the prefix for every endpoint. It can be empty.
- `Port` is the port the server listens on, on all interfaces. If it is
  empty, the system picks a free port.

## Running

```
classbooking [--config PATH]
```

`--config` defaults to `../config.json`, which is resolved from the current
directory. If the file cannot be read or decoded, the command exits with
`Failed to load config: ...`. The server runs until it receives SIGINT or
SIGTERM, and then shuts down gracefully.

## Endpoints

### `POST <BaseRoute>/class`

This creates a class. A class with the same name is replaced.

```json
{
  "className": "Yoga Class",
  "classCapacity": 30,
  "startDate": "2025-06-01",
  "endDate": "2025-06-10"
}
```

The request is rejected in these cases:

- Either date does not match `DateFormat`.
- The end date is before the start date.

The service stores only the capacity and the end date. The end date is cut to
midnight UTC. The start date is checked against the end date and is then
discarded.

### `POST <BaseRoute>/booking`

This books a member into a class on one date.

```json
{
  "className": "Yoga Class",
  "userName": "john_doe",
  "bookingDate": "2025-06-05"
}
```

A booking is rejected in these cases:

- The date does not match `DateFormat`.
- The class does not exist.
- The date is after the class's stored end date.
- The class already has `classCapacity` bookings on that date.

Because the start date is not stored, no date is rejected for being too
early.

### Responses

Every response is a JSON object:

```json
{"success": true, "message": "Booking created successfully"}
```

A request that succeeds returns status 200. Any other request returns status
400, with `success` set to `false` and the reason in `message`. That covers a
malformed body, a field of the wrong JSON type, a bad date and a broken
booking rule. A body that is not valid JSON gives the message
`error while unamrshalling`.

## Using it as a library

You can use the service layer without HTTP. `from_json` takes the JSON text
of a request body, as a `str` or as `bytes`.

```python
import json
import threading

from classbooking.config import Config
from classbooking.models import BookingInfo, ClassRequest
from classbooking.service import initialize_service
from classbooking.store import new_map_store

lock = threading.Lock()
store = new_map_store(lock)
config = Config.from_dict({"DateFormat": "2006-01-02", "BaseRoute": "", "Port": "8080"})
service = initialize_service(store, lock, config)

service.create_class(ClassRequest.from_json(json.dumps({
    "className": "Yoga Class",
    "classCapacity": 2,
    "startDate": "2025-06-01",
    "endDate": "2025-06-10",
})))
service.create_booking(BookingInfo.from_json(json.dumps({
    "className": "Yoga Class",
    "userName": "john_doe",
    "bookingDate": "2025-06-05",
})))
```

`new_map_store` returns one store that is shared across the whole process.

Each error that a client can be told about is a subclass of
`classbooking.errors.BookingServiceError`:

- `ClassNotExistError`
- `BookingDatePassedError`
- `SlotsFullError`
- `EndTimeBeforeStartTimeError`
- `DateParseError`
- `UnmarshallingError`

`Config.parse_date` parses a string with the configured layout.
`classbooking.routes.Router(...).set_routes()` returns the Flask application,
so you can serve it with any WSGI server.

## What it does not do

- Nothing is stored on disk.
- Classes and bookings cannot be listed or deleted over HTTP.
- There is no authentication.