# cleanusers

A small HTTP service for storing users. Each user has an id, a name and an age.
The users are kept in an SQLite database. The service is built in layers, and each layer only talks to the one below it:

- `cleanusers.handlers.Handler` holds the Flask view functions. They turn HTTP requests into calls on a service and map the results to JSON responses and status codes.
- `cleanusers.services.Service` is the business layer between the handlers and storage. It passes each call through to the repository.
- `cleanusers.repository.Repository` runs the SQL against an `sqlite3` connection. `create_schema(db)` creates the `users` table if it is missing. `get_user_by_id` and `upd_user_by_id` raise `UserNotFoundError` (a `LookupError`) when no user has the given id.
- `cleanusers.entities.User` is the dataclass passed between the layers. `User.to_dict()` gives its JSON form. `user_from_json(data)` builds a `User` from decoded JSON and works like this:
  - Keys are matched case-insensitively.
  - Unknown keys and `null` values are ignored.
  - A `null` body gives an empty user.
  - A non-object, a wrongly typed field or an integer outside the 64-bit range raises `ValueError`.

## Middlewares and logging

`cleanusers.middlewares` provides two hooks that are attached to a Flask app.

- `request_id_middleware(app)` gives each request a fresh UUID. It returns the UUID in the `X-Reques-ID` response header and makes it available during the request through `current_request_id()`.
- `logger_middleware(app, logger)` writes one log line for each finished request. The line holds the status, request id, method, path and the message that the handler recorded. The level depends on the status:
  - 500 and above is logged as an error (`server error`).
  - 400–499 is logged as a warning (`client error`).
  - Anything else is logged as info.

`cleanusers.logger.init_logger(path="app.log")` returns the `cleanusers` logger. The logger is set to DEBUG level and appends to `path`. It replaces any handlers the logger already had and does not propagate to the root logger.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the server

```
cleanusers [--db PATH] [--log-file PATH] [--host HOST] [--port PORT]
```

This command does the following:

1. Opens (or creates) the SQLite database and creates the `users` table.
2. Sets up logging to the log file.
3. Serves the API with Flask's built-in server.

| Option       | Default                                          |
|--------------|--------------------------------------------------|
| `--db`       | the `DB_PATH` environment variable, else `users.db` |
| `--log-file` | `app.log`                                        |
| `--host`     | `0.0.0.0`                                        |
| `--port`     | the `PORT` environment variable, else `8080`     |

## HTTP API

| Method | Path         | Body                        | Result |
|--------|--------------|-----------------------------|--------|
| POST   | `/adduser`   | `{"name": ..., "age": ...}` | 200 with `{"message": "Имя: <name>. Возраст: <age>. ID: <id>"}`; 400 on bad JSON |
| GET    | `/allusers`  |                             | 200 with an indented JSON list of users, or `null` when there are none |
| GET    | `/user/<id>` |                             | 200 with the user; 404 if absent |
| DELETE | `/user/<id>` |                             | 200 with `{"message": "Пользователь удален"}`; 404 if absent |
| PUT    | `/user/<id>` | `{"name": ..., "age": ...}` | 200 with the updated user, including its id; 404 if absent; 400 on bad JSON |

For every route that takes `<id>`, the endpoint answers 400 if the id is not a decimal integer or lies outside the signed 64-bit range.

Error responses carry an `error` field, and their messages are in Russian. Whenever the storage layer raises anything other than `UserNotFoundError`, the endpoint answers with status 500.

## Using it from Python

`cleanusers.app.create_app(service, logger)` returns the Flask application with both middlewares and all routes attached. This lets you wire it to your own connection and logger:

```python
import sqlite3

from cleanusers.app import create_app
from cleanusers.logger import init_logger
from cleanusers.repository import Repository, create_schema
from cleanusers.services import Service

db = sqlite3.connect("users.db", check_same_thread=False)
create_schema(db)

service = Service(Repository(db))
app = create_app(service, init_logger("app.log"))

client = app.test_client()
client.post("/adduser", json={"name": "Ann", "age": 30})
print(client.get("/allusers").get_json())
```

## Limitations

Storage is a single SQLite file behind one shared connection. Access to it is serialised with a lock, and there is no support for other database servers. The `cleanusers` command runs Flask's development server. For anything beyond local use, serve the app from `create_app` with a WSGI server of your choice.