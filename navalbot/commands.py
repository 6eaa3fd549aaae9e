"""
Commands a bot issues, shaped exactly like the ones a human client sends.

Each command carries a literal `type` tag so a list of them serializes to
JSON the executor can dispatch on.
"""

from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field


class Guidance(BaseModel):
    direction_target: float
    velocity_target: float


class Control(BaseModel):
    type: Literal['control'] = 'control'
    guidance: Optional[Guidance] = None
    altitude_target: Optional[float] = None
    aim_target: Optional[Tuple[float, float]] = None
    active: bool = False


class Fire(BaseModel):
    type: Literal['fire'] = 'fire'
    index: int = Field(ge=0)
    position_target: Tuple[float, float]


class Spawn(BaseModel):
    type: Literal['spawn'] = 'spawn'
    entity_type: str


class Upgrade(BaseModel):
    type: Literal['upgrade'] = 'upgrade'
    entity_type: str


Command = Annotated[Union[Control, Fire, Spawn, Upgrade], Field(discriminator='type')]


class BotOutput(BaseModel):
    """Result of one bot update: up to two commands and whether to quit."""

    commands: List[Command] = Field(default_factory=list, max_length=2)
    quit: bool = False
