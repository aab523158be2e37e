"""
Core simulation modules

pygame host modules (core.game, core.input_handler) are not re-exported here.
"""

from rkena_mma.core.state_machine import StateMachine
from rkena_mma.core.scheduler import Scheduler
from rkena_mma.core.world import World, create_world, step
from rkena_mma.core.match import MatchController

__all__ = ['StateMachine', 'Scheduler', 'World', 'create_world', 'step', 'MatchController']
