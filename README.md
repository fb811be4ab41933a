# composekit

Small helpers for integration tests that need real services running in
Docker. There are three modules:

- `composekit.cmd`: run a command and raise if it does not succeed.
- `composekit.docker`: start and stop a docker compose project and look up
  container addresses.
- `composekit.common`: one-time logging setup and test-name normalisation.

## Installation

```
pip install composekit
```

The package has no dependencies of its own. Using `composekit.docker`
requires the `docker` CLI with the compose plugin on your `PATH`.

## Running commands

```python
from composekit.cmd import CommandError, get_cmd_output, run_command

run_command(["make", "build"], "build the project", cwd=".")
commit = get_cmd_output(["git", "rev-parse", "HEAD"], "read the current commit", cwd=".")
```

`run_command` runs the command with the caller's standard input, output and
error. `get_cmd_output` captures standard output and returns it decoded as
UTF-8. Both log, at INFO level, the command they start and its success.

If the command exits with a non-zero status, both raise `CommandError`, a
`RuntimeError` whose `desc` and `returncode` attributes hold the
description you passed and the exit status:

```python
try:
    run_command(["false"], "run a failing command")
except CommandError as err:
    print(err.desc, err.returncode)  # run a failing command 1
```

## Docker compose projects

`DockerCompose(project_name, docker_compose_dir)` is tied to one compose
project name and the directory that holds its compose file.

- `run()` runs `docker compose -p <project> up -d --wait --timeout 1200000`
  in that directory.
- `stop()` runs `docker compose -p <project> down -v --remove-orphans` in
  that directory, taking the services down and removing their volumes.
- `get_container_ip(service_name)` inspects the container named
  `<project>-<service_name>-1` and returns its IP address, stripped of
  surrounding whitespace.

Used as a context manager, the project is started on entry and stopped on
exit. If starting fails, `stop()` is still called before the error is
raised again:

```python
from composekit.docker import DockerCompose

with DockerCompose("my_test_project", "tests/fixtures/compose") as compose:
    ip = compose.get_container_ip("minio")
    # talk to the service at `ip` ...
```

Any failing docker command raises `CommandError`.

## Test helpers

```python
from composekit.common import normalize_test_name, set_up

set_up()  # True: logging is now configured
set_up()  # False: already done in this process
normalize_test_name("tests::catalog.rest")  # "tests__catalog_rest"
```

`set_up()` calls `logging.basicConfig` once per process, at the level named
by the `LOG_LEVEL` environment variable (`ERROR` if unset). It is safe to
call from several threads.

`normalize_test_name` replaces `::` with `__` and `.` with `_`, giving a
name you can use as a compose project name.

## Running the tests

```
pip install composekit[test]
pytest
```