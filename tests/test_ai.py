"""
Tests untuk AI controller: decision gate, sticky movement, sprawl reaction,
weighted attack bands dengan stamina floor.
"""

from rkena_mma.ai.controller import AIController
from rkena_mma.config import ActionState, AIConfig
from rkena_mma.fighters.fighter import InputState, create_fighter


class ScriptedRandom:
    """Pengganti random.Random yang mengembalikan nilai berurutan"""

    def __init__(self, *values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


def make_ai(*rolls):
    controller = AIController()
    if rolls:
        controller.rng = ScriptedRandom(*rolls)
    return controller


def make_pair(ai_x=550.0, player_x=150.0, ai_stamina=100.0):
    ai = create_fighter(ai_x, is_player=False)
    ai.stamina = ai_stamina
    player = create_fighter(player_x, is_player=True)
    return ai, player


def pressed(controls):
    return {name for name, value in vars(controls).items() if value}


# =============================================================================
# GATING
# =============================================================================


def test_ko_ai_does_nothing():
    ai, player = make_pair()
    ai.state = ActionState.KO

    assert make_ai().decide(ai, player) == InputState()


def test_busy_ai_does_nothing():
    ai, player = make_pair()
    ai.state = ActionState.PUNCH
    ai.state_timer = 10

    assert make_ai().decide(ai, player) == InputState()


def test_recovering_ai_does_nothing():
    ai, player = make_pair()
    ai.state_timer = 5

    assert make_ai().decide(ai, player) == InputState()


def test_failed_decision_roll_idles():
    ai, player = make_pair()

    assert make_ai(0.5).decide(ai, player) == InputState()


# =============================================================================
# MOVEMENT
# =============================================================================


def test_far_ai_approaches_and_commits():
    ai, player = make_pair()
    controller = make_ai(0.1, 0.5, 0.9)

    controls = controller.decide(ai, player)

    assert pressed(controls) == {'left'}
    assert controller.memory.direction == -1
    assert controller.memory.timer == 45


def test_committed_movement_skips_decisions():
    ai, player = make_pair()
    controller = make_ai()
    controller.memory.commit(1, 2)
    # Scripted rng kosong: pop() gagal kalau rng dipakai
    controller.rng = ScriptedRandom()

    assert pressed(controller.decide(ai, player)) == {'right'}
    assert pressed(controller.decide(ai, player)) == {'right'}
    assert controller.memory.timer == 0


def test_approach_can_shoot_from_range():
    ai, player = make_pair()
    controller = make_ai(0.1, 0.0, 0.01)

    controls = controller.decide(ai, player)

    assert controls.takedown
    assert controls.left


def test_no_shot_from_range_when_tired():
    ai, player = make_pair(ai_stamina=50)
    controller = make_ai(0.1, 0.0, 0.01)

    assert not controller.decide(ai, player).takedown


def test_reposition_moves_away():
    ai, player = make_pair(ai_x=280)
    controller = make_ai(0.1, 0.5)

    controls = controller.decide(ai, player)

    assert pressed(controls) == {'right'}
    assert controller.memory.direction == 1
    assert controller.memory.timer == 30


def test_in_range_but_facing_away_repositions():
    ai, player = make_pair(ai_x=250)
    ai.direction = 1
    controller = make_ai(0.1, 0.0)

    controls = controller.decide(ai, player)

    assert pressed(controls) == {'right'}


# =============================================================================
# ATTACKS
# =============================================================================


def test_attack_bands():
    cases = [
        (0.2, 'punch'),
        (0.5, 'kick'),
        (0.8, 'takedown'),
        (0.9, 'block'),
    ]
    for roll, expected in cases:
        ai, player = make_pair(ai_x=250)
        controller = make_ai(0.1, roll)

        assert pressed(controller.decide(ai, player)) == {expected}
        assert controller.memory.timer == 0


def test_no_takedown_when_too_close():
    ai, player = make_pair(ai_x=190)
    controller = make_ai(0.1, 0.8)

    assert pressed(controller.decide(ai, player)) == {'block'}


def test_tired_ai_falls_back_to_block():
    for roll in (0.2, 0.5, 0.8):
        ai, player = make_pair(ai_x=250, ai_stamina=15)
        controller = make_ai(0.1, roll)

        assert pressed(controller.decide(ai, player)) == {'block'}


def test_tired_ai_never_attacks_over_many_ticks():
    controller = AIController(seed=1234)
    for tick in range(3000):
        ai, player = make_pair(ai_x=160 + (tick % 400), ai_stamina=15)
        controls = controller.decide(ai, player)

        assert not (controls.punch or controls.kick or controls.takedown)


# =============================================================================
# SPRAWL
# =============================================================================


def test_sprawl_reaction_blocks_incoming_takedown():
    ai, player = make_pair(ai_x=300)
    player.state = ActionState.TAKEDOWN
    player.state_timer = 45
    controller = make_ai(0.4)

    assert pressed(controller.decide(ai, player)) == {'block'}


def test_sprawl_reaction_can_miss():
    ai, player = make_pair(ai_x=300)
    player.state = ActionState.TAKEDOWN
    player.state_timer = 45
    controller = make_ai(0.6, 0.9)

    assert controller.decide(ai, player) == InputState()


def test_seeded_controllers_agree():
    first = AIController(seed=7)
    second = AIController(seed=7)

    for tick in range(500):
        ai, player = make_pair(ai_x=200 + (tick % 300))
        assert first.decide(ai, player) == second.decide(ai, player)


def sprawl_rate(sprawl_chance, decides=2000):
    controller = AIController(AIConfig(sprawl_chance=sprawl_chance), seed=11)
    blocks = 0
    for _ in range(decides):
        ai, player = make_pair(ai_x=300)
        player.state = ActionState.TAKEDOWN
        player.state_timer = 45
        controller.memory.clear()
        if controller.decide(ai, player).block:
            blocks += 1
    return blocks / decides


def test_sprawl_chance_is_probability_of_blocking():
    assert sprawl_rate(0.9) > 0.8
    assert sprawl_rate(0.1) < 0.2
