"""
Navigation graph model consumed by the directions generator.

Converts a JSON description of an already validated navigation graph into
immutable Destination / Action / Argument values that generators can work
with consistently.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .errors import ModelError
from .types import NULL_VALUE, ArgumentType


@dataclass(frozen=True)
class Id:
    """Package qualified resource id, rendered as ``<package>.R.id.<name>``."""

    package_name: str
    name: str

    def __post_init__(self):
        if not self.name:
            raise ModelError("Id name must not be empty")
        if not self.package_name:
            raise ModelError(f"Id '{self.name}' has no package")

    def __str__(self) -> str:
        return f"{self.package_name}:id/{self.name}"


@dataclass(frozen=True)
class Argument:
    """
    A named, typed action argument.

    ``default_value`` keeps the spelling used in the graph (``"12"``,
    ``"true"``, ``"@null"``...). An argument is optional exactly when it has
    a default value.
    """

    name: str
    type: ArgumentType
    default_value: Optional[str] = None

    def __post_init__(self):
        if not self.name:
            raise ModelError("Argument name must not be empty")
        if self.default_value is not None and not isinstance(self.default_value, str):
            raise ModelError(
                f"Default value must be a string, got {self.default_value!r}",
                argument=self.name,
            )

    @property
    def is_optional(self) -> bool:
        return self.default_value is not None


@dataclass(frozen=True)
class Action:
    """Transition from the owning destination to ``destination``.

    A ``None`` destination means the action navigates nowhere (id ``0``).
    """

    id: Id
    destination: Optional[Id] = None
    args: Tuple[Argument, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "args", tuple(self.args))

        seen = set()
        for arg in self.args:
            if arg.name in seen:
                raise ModelError(
                    f"Duplicate argument name {arg.name!r}",
                    action=self.id.name,
                    argument=arg.name,
                )
            seen.add(arg.name)


@dataclass(frozen=True)
class Destination:
    """A node of the navigation graph; nested graphs keep their children in ``nested``."""

    name: str = ""
    id: Optional[Id] = None
    actions: Tuple[Action, ...] = ()
    nested: Tuple["Destination", ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "actions", tuple(self.actions))
        object.__setattr__(self, "nested", tuple(self.nested))

    @property
    def label(self) -> str:
        """Human readable identity used in error messages."""
        if self.name:
            return self.name
        if self.id is not None:
            return str(self.id)
        return "<anonymous destination>"


@dataclass(frozen=True)
class NavigationGraph:
    destinations: Tuple[Destination, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "destinations", tuple(self.destinations))

    def iter_destinations(self) -> Iterator[Destination]:
        """Yield every destination, parents before their nested children."""

        def walk(destinations):
            for destination in destinations:
                yield destination
                yield from walk(destination.nested)

        return walk(self.destinations)


# JSON conversion


def _require_mapping(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ModelError(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


def _convert_id(data: Any, what: str, application_id: str) -> Optional[Id]:
    if data is None:
        return None
    data = _require_mapping(data, what)
    if "name" not in data:
        raise ModelError(f"{what} is missing 'name'")
    # ids written as @id/name belong to the application package
    package = str(data.get("package") or application_id)
    if not package:
        raise ModelError(
            f"{what} '{data['name']}' has no package and no application id was given"
        )
    return Id(package_name=package, name=str(data["name"]))


def _convert_default(value: Any) -> str:
    """Stringify a JSON default the way it would be written in the graph XML."""
    if value is None:
        return NULL_VALUE
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, str)):
        return str(value)
    raise ModelError(f"Unsupported default value {value!r}")


def _convert_argument(data: Any) -> Argument:
    data = _require_mapping(data, "Argument")
    name = data.get("name", "")
    if "type" not in data:
        raise ModelError("Argument is missing 'type'", argument=name or None)

    try:
        arg_type = ArgumentType.parse(str(data["type"]), str(data.get("class", "")))
        default = _convert_default(data["default"]) if "default" in data else None
        return Argument(name=name, type=arg_type, default_value=default)
    except ModelError as e:
        raise e.add_context(argument=name or None)


def _convert_action(data: Any, application_id: str) -> Action:
    data = _require_mapping(data, "Action")
    action_id = _convert_id(data.get("id"), "Action id", application_id)
    if action_id is None:
        raise ModelError("Action is missing 'id'")

    try:
        args = [_convert_argument(arg) for arg in data.get("arguments", [])]
        return Action(
            id=action_id,
            destination=_convert_id(
                data.get("destination"), "Action destination", application_id
            ),
            args=tuple(args),
        )
    except ModelError as e:
        raise e.add_context(action=action_id.name)


def _convert_destination(data: Any, application_id: str) -> Destination:
    data = _require_mapping(data, "Destination")
    name = data.get("name") or ""

    try:
        destination_id = _convert_id(data.get("id"), "Destination id", application_id)
    except ModelError as e:
        raise e.add_context(destination=name or None)
    label = name or (str(destination_id) if destination_id else None)

    try:
        actions = [
            _convert_action(action, application_id) for action in data.get("actions", [])
        ]
        nested = [
            _convert_destination(child, application_id) for child in data.get("nested", [])
        ]
    except ModelError as e:
        raise e.add_context(destination=label)

    return Destination(
        name=name,
        id=destination_id,
        actions=tuple(actions),
        nested=tuple(nested),
    )


def graph_from_dict(data: Any, application_id: str = "") -> NavigationGraph:
    """
    Build a NavigationGraph from its JSON form.

    Args:
        data: ``{"destinations": [...]}`` or a bare list of destinations
        application_id: Package given to ids that do not name one

    Returns:
        NavigationGraph with all destinations converted

    Raises:
        ModelError: If the document does not describe a valid graph
    """
    if isinstance(data, list):
        destinations = data
    else:
        destinations = _require_mapping(data, "Navigation graph").get("destinations", [])

    if not isinstance(destinations, list):
        raise ModelError("'destinations' must be a list")

    return NavigationGraph(
        tuple(_convert_destination(d, application_id) for d in destinations)
    )


def count_actions(graph: NavigationGraph) -> int:
    return sum(len(d.actions) for d in graph.iter_destinations())


def collect_arguments(graph: NavigationGraph) -> List[Tuple[Destination, Action, Argument]]:
    """Flatten the graph into (destination, action, argument) triples."""
    return [
        (destination, action, arg)
        for destination in graph.iter_destinations()
        for action in destination.actions
        for arg in action.args
    ]
