# clusterbot

Building blocks for a chat bot that launches and manages test clusters. The
package parses chat commands and their parameters, and reads and answers
modal interactions. It also checks that incoming requests are signed. It uses
only the standard library and opens no network connections itself.

## Modules

- `clusterbot.parser` matches message text against usage patterns such as
  `launch <image_or_version_or_prs> <options>`. `new_command(format)` builds a
  `Command`, and its `match(text)` returns a `Properties` object or `None`.
  Trailing parameters may be left out of the message. `new_bot_command(usage,
  definition, is_private)` wraps a command with a `CommandDefinition`
  (description, example, handler). Its `execute(...)` calls the handler, or
  returns `"Failed to execute the command!"` when there is none.
- `clusterbot.params` has `build_job_params`, which parses a comma-separated
  list of double-quoted `"KEY=VALUE"` pairs. Typographic quotes are accepted.
  `parse_parameter_value` reduces a `<url|label>` link to its label.
- `clusterbot.inputs` has `parse_image_input`, which splits a comma-separated
  list of images, versions or PRs, and `code_slice`, which wraps items in
  backticks.
- `clusterbot.utils` has `strip_links`, which removes chat link markup, and
  `params_from_annotation`, which parses `KEY[=VALUE]` lists. It also defines
  the tag names used on clusters (`USER_TAG`, `CHANNEL_TAG`, ...).
- `clusterbot.interactions` defines `Handler` and `PartialHandler` for
  interaction callbacks. `handler_func` and `partial_handler_func` build them
  from plain functions, and `handler_from_partial` and `partial_from_handler`
  adapt one kind to the other. `multi_handler` offers a callback to each
  partial handler in turn until one consumes it.
- `clusterbot.modals` registers modal views (`for_view(...).with_follow_ups(...)`)
  and answers button presses (`update_view_for_button_press`). It holds the
  issue-filing views (`pending_jira_view`, `not_enabled_view`, `jira_view`,
  `error_view`). It reads submitted state with `values_for`,
  `callback_selection`, `callback_input`, `callback_multiple_select` and
  `callback_input_all`. It also encodes validation error responses
  (`validation_error`) and builds select options (`build_options`).
- `clusterbot.launch_context` holds the launch wizard's identifiers, the
  `CallbackData` record and `callback_context`. That function reads the
  `Key: value;Key: value` context line carried between steps.
- `clusterbot.launch_validation` rejects a version step where more than one
  version source was chosen (`validate_filter_version`, `check_variables`).
- `clusterbot.mention` builds the reply blocks for a message that mentions the
  bot (`response_for`).
- `clusterbot.workflow_step` turns a workflow step edit submission into step
  inputs and outputs (`step_from_app_submit`).
- `clusterbot.signing` checks a request's signature and timestamp headers
  against the signing secret (`verified_body`). It raises `SignatureError` on
  failure.

Callbacks and views are plain dictionaries shaped like the chat platform's
JSON payloads.

## Example

```python
from clusterbot.params import build_job_params
from clusterbot.parser import new_command

command = new_command("rosa create <version> <duration>")
properties = command.match("rosa create 4.18 3h")
print(properties.string_param("version", ""))   # 4.18
print(properties.string_param("duration", ""))  # 3h

print(build_job_params('"KEY1=VALUE1","KEY2=<http://example.com|VALUE2>"'))
# {'KEY1': 'VALUE1', 'KEY2': 'VALUE2'}
```

Parsing functions raise `ValueError` when the input is malformed. The message
explains what to fix.

## What it does not do

The package does not run a bot. It has no server that receives events, no
chat client that posts messages or opens views, and no job manager. It does
not launch, list or terminate clusters, and it has no command-line entry
point. Those pieces are supplied by the application that uses these modules.

## Running the tests

```
pip install -e ".[test]"
pytest
```