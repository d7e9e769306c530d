# mallsecurity

Back-office logic for a shopping-mall security robot service. The package
covers:

- administrator and operator accounts
- the queue of operators waiting for approval
- frequently asked questions
- questions sent in by customers
- the alarm history

Every collection is stored in a plain text file. Each record is one line, and
`|` separates its fields.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `mallsecurity.model`

This module holds the domain types as dataclasses:

- geometry: `Point` and `Route`
- sensors: `Sensor`, `CameraSensor`, `SoundSensor` and `UltrasonicSensor`
- accounts: `UserAccount`, `Administrator` and `SecurityOperator`
- content: `Question`, `Warning`, `WarningReport` and `MallMap`

A few of these types have behaviour of their own:

- A `SecurityOperator` is built from name, last name, DNI and password. Its
  DNI is also its `username`.
- `WarningReport.add` appends a warning to the report's history.
- `MallMap.add_zone` stores a named `Point` and replaces any zone already under
  that name.
- `MallMap.remove_zone` removes a zone and returns its point. It raises
  `KeyError` if the name is unknown.

### `mallsecurity.persistence`

This module reads and writes the text files:

| Data | Functions | Line format |
| --- | --- | --- |
| Registered operators | `save_users` / `load_users` | `name\|last_name\|dni\|password` |
| Operators awaiting approval | `save_pending_operators` / `load_pending_operators` | same as registered operators |
| Alarms | `save_alarms` / `load_alarms` | `type\|start\|end` |
| FAQ entries | `save_questions` / `load_questions` | `question\|answer` |
| Customer questions | `save_new_questions` / `load_new_questions` | one question per line |

Alarm dates are written in ISO format. A missing date is written as an empty
field.

When loading:

- A line with too few fields raises `ValueError`.
- A date that cannot be parsed raises `ValueError`.
- Extra fields are ignored.

### `mallsecurity.controller`

This module provides `Controller`. It keeps each collection in memory and writes
the collection back to its file every time it changes.

The files live in the directory passed to `Controller(directory)`. The default is
the current directory, and the directory must already exist. The file names are
class attributes:

| Attribute | File | Contents |
| --- | --- | --- |
| `USERS_FILE` | `usuarios.txt` | registered operators |
| `REGISTRATION_FILE` | `registrooperadores.txt` | operators awaiting approval |
| `FAQ_FILE` | `preguntasfrecuentes.txt` | FAQ entries |
| `NEW_QUESTIONS_FILE` | `preguntasnuevas.txt` | customer questions |
| `ALARMS_FILE` | `alarmas.txt` | alarm history |

The `query_all_*` methods reload a collection from its file and return a copy.
They raise `FileNotFoundError` if the file does not exist yet. A fresh controller
starts with empty collections, so you can add records before the first reload.

`validate_admin` accepts only the fixed built-in administrator credentials.
Registered operators are checked with `validate_operator(username, password)`.

## Example

```python
from mallsecurity.controller import Controller
from mallsecurity.model import Question, SecurityOperator

password = "password"
controller = Controller()

controller.add_user(SecurityOperator("Ana", "Diaz", "op-001", password))
assert controller.validate_operator("op-001", password)

controller.add_question(Question("Where is parking?", "Level -1"))
print(controller.query_answer_by_question("Where is parking?"))

# The files now exist, so they can be reloaded.
print([op.name for op in controller.query_all_users()])
```

## What the package does not do

The package has:

- no user interface and no command-line program
- no control of a robot
- no live sensor readings: the sensor classes only hold values
- no storage for mall maps and their zones

`Controller.ZONES_FILE` names a file, but nothing reads or writes it.