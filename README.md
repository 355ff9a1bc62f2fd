# zerobase

A small toolkit built around a few HTTP services and helpers:

- `zerobase.webapp`: a demo JSON API with ping, login, register and course
  routes, guarded by token and auth checks;
- `zerobase.translator`: a translation endpoint that hands text to a locally
  running Ollama model;
- `zerobase.models`: SQLAlchemy models and examples for creating, querying
  and transactional writes of `Teacher` records;
- `zerobase.textcolor`, `zerobase.strutil`, `zerobase.netinfo`: console
  helpers for ANSI colours, time strings, JSON encoding and network
  information;
- `zerobase.logdemo`: a JSON log formatter and a small logging demo;
- `zerobase.cli`: the `zerobase` command.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
zerobase                              # prints a welcome tip, exits with status 255
zerobase server -c config/settings.yml
zerobase ai
```

- With no arguments, `zerobase` prints the welcome tip and the error
  "requires at least one arg". A first word that is not a sub-command (and
  not an option) just prints the tip.
- `server` accepts `-c/--config` (default `config/settings.yml`) and
  `-a/--api`. It prints the local and network addresses for the port in
  `WebConfig` (8901) and waits until you press Control + C.
- `ai` starts the translation service on port 8088.

The services can also be started directly:

```
zerobase-web          # demo API, options --host (default 0.0.0.0) and --port (default 8080)
zerobase-translator   # translation API, options --host, --port (default 8088),
                      # --model and --ollama-url (default http://localhost:11434)
```

## Demo API

| Method | Path               | Checks       | Response message   |
|--------|--------------------|--------------|--------------------|
| GET    | `/api/v1/ping`     |              | `pong`             |
| POST   | `/api/v1/login`    |              | `login`            |
| POST   | `/api/v1/register` |              | `Register`         |
| POST   | `/v1/course`       | token, auth  | `create course`    |
| GET    | `/v1/course`       | token, auth  | empty body         |
| PUT    | `/v1/course`       | token, auth  | empty body         |
| DELETE | `/v1/course`       | token, auth  | empty body         |
| POST   | `/v2/course`       | auth         | `V2 create course` |

Routes under `/v1` require the header `access_toke: token`; a request
without it is answered with status 500 and `{"message": "token 检查失败"}`.
The auth check prints the user id and name set by the token check. Unknown
paths and wrong methods get a plain-text `404 page not found`.

```python
from zerobase.webapp import create_app

client = create_app().test_client()
print(client.get("/api/v1/ping").get_json())   # {'message': 'pong'}
```

`zerobase.webconfig.WebConfig` is a dataclass holding server settings
(`read_timeout`, `writer_timeout`, `host`, `port`, `name`, `mode`,
`demo_msg`, `enable_dp`) with their defaults.

## Translation API

`POST /api/v1/translate` with a JSON body:

```json
{"outputLang": "English", "text": "今天天气不错"}
```

Field names are matched case-insensitively; missing fields are empty. The
answer is `{"response": "..."}` with the model's output, 400 with
`{"error": "Invalid Json."}` for a body that is not a JSON object of
strings, and 500 with `{"error": ...}` when the model call fails.

```python
from zerobase.translator import OllamaChat, build_messages, create_app

messages = build_messages("English", "今天天气不错")   # system + user messages
app = create_app(OllamaChat(timeout=60))
```

`create_app` accepts any object with a `generate(messages)` method that
returns the reply text.

## Database examples

```python
from sqlalchemy.orm import Session
from zerobase.models import make_engine, migrate, create_records, query, count_teachers

engine = make_engine("sqlite:///teachers.db")
migrate(engine)
with Session(engine) as session:
    create_records(session)          # returns the inserted Teacher objects
    results = query(session)         # dict: first, last, take, first_as_map, take_as_map, by_name
    print(count_teachers(session))
```

`Teacher` has a check constraint `age > 30`, stores `birthday` as Unix
seconds, `roles` as JSON, `job_info` as the `job_title`/`job_location`
columns and `job_info2` as a serialised `Job`. `template_teacher()` returns
an unsaved sample teacher. `transaction(session)` inserts two teachers in
one transaction; `nested_transaction(session)` inserts four inside one
transaction, rolling back the savepoint around the second, so three remain.

## Helpers

```python
from zerobase.textcolor import green, red, set_color
from zerobase.strutil import string_to_int, current_time_str, to_json_str
from zerobase.netinfo import get_local_host, get_location

print(green("ok"), red("failed"))
string_to_int("42")          # 42; ValueError on bad syntax or 64-bit overflow
current_time_str()           # e.g. "2025-06-03 13:57:14"
to_json_str({"b": 1, "a": "<"})   # '{"a":"\u003c","b":1}'
get_local_host()             # first non-loopback IPv4 address, or ""
get_location("127.0.0.1", "placeholder")   # "内部IP"
```

`get_location` queries a remote IP geolocation service with the given key
and returns `country-province-city-district-isp`, or `未知位置` on failure.

Logging in JSON:

```python
import sys
from zerobase.logdemo import configure

logger = configure(sys.stdout)    # warning level, one JSON object per line
logger.warning("The group's number increased tremendously!",
               extra={"fields": {"omg": True, "number": 122}})
```

`demo(logger)` logs the sample entries and then exits the process with
status 1, after its fatal entry.

## What it does not do

- `zerobase server` does not serve HTTP: it reads no configuration file and
  only prints addresses and waits. Use `zerobase-web` to serve the demo API.
- The login and register routes only answer with a fixed message; there is
  no user storage.
- The database examples do not connect anywhere by themselves; you pass an
  engine URL to `make_engine`.