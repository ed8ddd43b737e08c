# ratelimitapi

A small JSON HTTP API built on Flask. It sets security and CORS headers on
every response and checks the request content type. It also limits each
client with a token bucket, so a client can only make a few requests at a time.

## Endpoints

| Method | Path        | Response                                   |
|--------|-------------|--------------------------------------------|
| GET    | `/api/ping` | `{"message": "pong"}`                      |
| GET    | `/api/time` | `{"server_time": "<RFC 3339 timestamp>"}`  |

`/api/time` reports the server's local time to the second, with its UTC
offset. When the offset is zero it ends in `Z`.

### Rate limits

Each endpoint keeps its own limit for each client address. A bucket holds up
to 2 tokens and refills at one token every 5 seconds. A request that finds the
bucket empty gets `429 Too Many Requests`:

```json
{"error": "Too Many Requests", "message": "You have exceeded the rate limit. Please try again later."}
```

A background thread runs once a minute. It forgets any client that has been
idle for more than 10 seconds.

### Other responses

* Unknown paths get `404` with a JSON body: `{"error": "Not Found", ...}`.
* Methods a route does not accept get `405` with a JSON body:
  `{"error": "Method Not Allowed", ...}`.
* `POST` and `PUT` requests get `415` with a JSON body when their
  `Content-Type` does not start with `application/json`. This check runs
  before routing.
* `OPTIONS` requests are treated as CORS preflights. They get an empty `204`.
* Every response, including the error responses above, carries these headers:
  * the security headers `X-Frame-Options`, `X-Content-Type-Options`,
    `X-XSS-Protection`, `Strict-Transport-Security`, `Referrer-Policy` and
    `Permissions-Policy`
  * the CORS headers, with `Access-Control-Allow-Origin: http://localhost`
* A response body is gzip-compressed when the client sends
  `Accept-Encoding: gzip`.

## Installation

```console
pip install .
```

## Running

The `ratelimitapi` command reads its settings from the environment. All four
variables must be set:

| Variable      | Example       | Meaning                                   |
|---------------|---------------|-------------------------------------------|
| `ENV`         | `DEVELOPMENT` | `PRODUCTION` turns Flask debug mode off   |
| `PORT`        | `8080`        | Port to listen on, on all interfaces      |
| `IS_SSL`      | `FALSE`       | Must be set; its value is not used        |
| `API_VERSION` | `v1`          | Must be set; its value is not used        |

```console
ENV=DEVELOPMENT PORT=8080 IS_SSL=FALSE API_VERSION=v1 ratelimitapi
```

If any variable is missing or empty, the command prints an example and exits
with status 1. It also exits with status 1 if the server cannot start, for
example when `PORT` is not a number or the port is in use.

The command serves the app with Flask's built-in development server.

## Using it as a library

`ratelimitapi.app.create_app()` returns a configured Flask application. You
can serve it with any WSGI server, or use it with Flask's test client:

```python
from ratelimitapi.app import create_app

app = create_app()
client = app.test_client()
print(client.get("/api/ping").get_json())  # {'message': 'pong'}
```

The pieces are also usable on their own.

* `ratelimitapi.ratelimiter`
  * `TokenBucket(rate, burst, clock)` is a thread-safe token bucket. It has
    `allow()` and `tokens()`.
  * `VisitorRegistry(rate, burst, expire_after, clock)` keeps one bucket per
    key. It has `get(key)`, `cleanup()` and `start_cleanup(interval)`. The last
    returns a `threading.Event` that stops the thread when set.
  * `visitor_key(ip, method, path)` builds the key a client is tracked by.
  * `rate_limit(rate, burst, expire_after)` is a decorator for Flask views.
    The view it returns exposes its registry as `.registry`.
* `ratelimitapi.headers`
  * `install_header_middleware(app)` adds the header handling, the preflight
    handling and the content-type check to any Flask app.
  * `security_headers()`, `cors_headers()`, `is_preflight(method)` and
    `content_type_allowed(method, content_type)` hold the rules behind it.

```python
from flask import Flask
from ratelimitapi.ratelimiter import rate_limit

app = Flask(__name__)

@app.get("/api/slow")
@rate_limit(rate=0.2, burst=2, expire_after=10.0)
def slow():
    return {"ok": True}
```

## What it does not do

* The rate limits are kept in memory, one store per decorated view. They are
  not shared between processes and are lost on restart.
* TLS is not set up. `IS_SSL` is required but ignored, so the server speaks
  plain HTTP.
* `API_VERSION` does not change the routes. They are always under `/api`.

## Tests

```console
pip install ".[test]"
pytest
```