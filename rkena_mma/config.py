"""
RKENA MMA Championship - Configuration & Constants
==================================================
All game settings, colors, enums, and balance tables in one place.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict, Optional

# =============================================================================
# DISPLAY SETTINGS
# =============================================================================

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 450
WINDOW_SCALE = 2  # Window = arena * scale, arena tetap 800x450
FPS = 60
GAME_TITLE = "RKENA MMA CHAMPIONSHIP"

# =============================================================================
# COLORS
# =============================================================================

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRAY = (128, 128, 128)
DARK_GRAY = (40, 40, 40)
LIGHT_GRAY = (180, 180, 180)

RED = (220, 38, 38)
DARK_RED = (150, 30, 30)
BLOOD_RED = (170, 0, 0)
GREEN = (34, 197, 94)
BLUE = (96, 165, 250)
YELLOW = (250, 204, 21)
GOLD = (255, 215, 0)

# Fighters
COLOR_SKIN_P1 = (255, 204, 170)
COLOR_SHORTS_P1 = (176, 2, 25)      # Deep red
COLOR_SKIN_P2 = (93, 64, 55)
COLOR_SHORTS_P2 = (31, 41, 55)      # Dark grey

# Arena
COLOR_BG = (51, 51, 51)
COLOR_FENCE = (85, 85, 85)
COLOR_MAT = (200, 200, 190)
COLOR_MAT_LINE = (160, 30, 40)

# UI colors
UI_BG = (20, 20, 30)
HEALTH_GREEN = (34, 197, 94)
HEALTH_YELLOW = (234, 179, 8)
HEALTH_RED = (220, 38, 38)
STAMINA_BLUE = (96, 165, 250)
NAME_BAR_P1 = (209, 13, 37)
NAME_BAR_P2 = (30, 64, 175)

# =============================================================================
# ARENA / FIGHTER SETTINGS
# =============================================================================

ARENA_WIDTH = SCREEN_WIDTH
GROUND_Y = 400  # Ground line, kaki fighter berdiri di sini

FIGHTER_WIDTH = 100
FIGHTER_HEIGHT = 180

PLAYER_START_X = 150
ENEMY_START_X = 550

DEFAULT_MAX_HEALTH = 100
DEFAULT_MAX_STAMINA = 100

PLAYER_NAME = "MERAB SHARIKADZE"
ENEMY_NAME = "JON JONES"

# =============================================================================
# TIMING
# =============================================================================

FIXED_TIME_STEP_MS = 1000.0 / 60.0
MAX_ACCUMULATOR_MS = 200.0  # Cap untuk mencegah spiral of death
ROUND_DURATION = 180  # seconds
KO_DELAY_MS = 3000.0  # Biar animasi KO kelihatan dulu

# =============================================================================
# PARTICLES & COMMENTARY
# =============================================================================

PARTICLE_GRAVITY = 0.8  # px per tick^2
PARTICLE_SPEED = 15.0
PARTICLE_LIFE_MIN = 20
PARTICLE_LIFE_SPREAD = 20
PARTICLE_SIZE_MIN = 3
PARTICLE_SIZE_SPREAD = 6
MAX_PARTICLES = 500

SHOUT_FRAMES = 90  # ~1.5 detik
COMMENTATOR_SEATS = 3

# =============================================================================
# AUDIO SETTINGS
# =============================================================================

AUDIO_ENABLED = True
AUDIO_SAMPLE_RATE = 44100
AUDIO_CHANNELS = 2
AUDIO_BUFFER_SIZE = 512

MASTER_VOLUME = 0.8
SFX_VOLUME = 0.7

# =============================================================================
# DEBUG FLAGS
# =============================================================================

DEBUG_HITBOXES = False
DEBUG_FRAMERATE = False

# =============================================================================
# ENUMS
# =============================================================================


class GameState(Enum):
    """Match flow states"""
    MENU = auto()
    PLAYING = auto()
    VICTORY = auto()
    GAMEOVER = auto()


class ActionState(Enum):
    """Fighter action states"""
    IDLE = "IDLE"
    WALK = "WALK"
    PUNCH = "PUNCH"
    KICK = "KICK"
    BLOCK = "BLOCK"
    HIT = "HIT"
    KO = "KO"
    TAKEDOWN = "TAKEDOWN"
    SPRAWL = "SPRAWL"
    SLAMMED = "SLAMMED"


class Winner(Enum):
    """Outcome yang dibawa game-over event"""
    PLAYER = "PLAYER"
    ENEMY = "ENEMY"
    DRAW = "DRAW"


class CombatEventType(Enum):
    """Hasil resolusi satu serangan"""
    CLASH = "clash"                  # Takedown vs takedown
    SPRAWL = "sprawl"                # Takedown vs block
    TAKEDOWN = "takedown"            # Takedown berhasil
    BLOCKED = "blocked"              # Punch/kick kena guard
    HIT = "hit"                      # Punch/kick bersih


# Attack states carry a hitbox; HIT/SLAMMED/SPRAWL are reeling states.
ATTACK_STATES = frozenset({ActionState.PUNCH, ActionState.KICK, ActionState.TAKEDOWN})
BUSY_STATES = frozenset({
    ActionState.PUNCH, ActionState.KICK, ActionState.HIT, ActionState.BLOCK,
    ActionState.TAKEDOWN, ActionState.SPRAWL, ActionState.SLAMMED,
})
UNHITTABLE_STATES = frozenset({
    ActionState.HIT, ActionState.SLAMMED, ActionState.KO, ActionState.SPRAWL,
})

# =============================================================================
# BALANCE
# =============================================================================


@dataclass(frozen=True)
class BalanceConfig:
    """
    Balance tunables. Semua nilai per fixed tick (1/60 s) kecuali disebut lain.
    Relative ordering takedown > kick > punch (damage dan cost) wajib dijaga.
    """
    move_speed: float = 4.5
    ai_speed_mult: float = 0.5
    player_lunge_mult: float = 1.2
    ai_lunge_mult: float = 0.8
    lunge_stop_ratio: float = 0.8  # Stop lunge kalau jarak < width * ratio

    stamina_regen: float = 0.4
    min_action_stamina: float = 10

    damage_punch: float = 4
    damage_kick: float = 6
    damage_takedown: float = 12

    stamina_cost_punch: float = 10
    stamina_cost_kick: float = 20
    stamina_cost_takedown: float = 25

    punch_frames: int = 25
    kick_frames: int = 40
    takedown_frames: int = 50
    block_frames: int = 20
    hit_stun_frames: int = 25
    slammed_frames: int = 80
    sprawl_frames: int = 35

    takedown_window_start: float = 0.3
    takedown_window_end: float = 0.8
    strike_active_min_frames: int = 5

    clash_stamina_loss: float = 10
    sprawl_attacker_stamina_loss: float = 15
    sprawl_defender_stamina_loss: float = 5
    block_stamina_mult: float = 2.0
    knockback: float = 20
    recovery_frames: int = 15

    def damage_for(self, state: ActionState) -> float:
        return {
            ActionState.PUNCH: self.damage_punch,
            ActionState.KICK: self.damage_kick,
            ActionState.TAKEDOWN: self.damage_takedown,
        }.get(state, 0)

    def stamina_cost_for(self, state: ActionState) -> float:
        return {
            ActionState.PUNCH: self.stamina_cost_punch,
            ActionState.KICK: self.stamina_cost_kick,
            ActionState.TAKEDOWN: self.stamina_cost_takedown,
        }.get(state, 0)

    def frames_for(self, state: ActionState) -> int:
        return {
            ActionState.PUNCH: self.punch_frames,
            ActionState.KICK: self.kick_frames,
            ActionState.TAKEDOWN: self.takedown_frames,
            ActionState.BLOCK: self.block_frames,
            ActionState.HIT: self.hit_stun_frames,
            ActionState.SLAMMED: self.slammed_frames,
            ActionState.SPRAWL: self.sprawl_frames,
        }.get(state, 0)

    def in_takedown_window(self, state_timer: int) -> bool:
        """Apakah takedown sedang di fase 'shoot' (lunge + hitbox live)"""
        total = self.takedown_frames
        return (total * self.takedown_window_start < state_timer
                <= total * self.takedown_window_end)


@dataclass(frozen=True)
class AIConfig:
    """Probability model untuk AI opponent"""
    attack_range_ratio: float = 1.2
    approach_buffer: float = 20
    sprawl_extra_range: float = 80
    sprawl_chance: float = 0.5
    decision_chance: float = 0.15

    approach_frames_min: int = 30
    approach_frames_spread: int = 30
    reposition_frames_min: int = 20
    reposition_frames_spread: int = 20

    approach_takedown_chance: float = 0.03
    approach_takedown_stamina: float = 50

    # Cumulative bands: rand < punch -> punch, < kick -> kick, < takedown -> takedown, else block
    punch_band: float = 0.40
    kick_band: float = 0.70
    takedown_band: float = 0.85

    punch_stamina: float = 20
    kick_stamina: float = 20
    takedown_stamina: float = 40
    takedown_min_distance_ratio: float = 0.5


DEFAULT_BALANCE = BalanceConfig()
DEFAULT_AI = AIConfig()

# =============================================================================
# ACTION DEFINITIONS
# =============================================================================


@dataclass(frozen=True)
class HitboxShape:
    """
    Geometri hitbox relatif terhadap body fighter (semua ratio dari width/height).
    x dihitung dari posisi kiri fighter; offset dipakai saat menghadap kanan.
    """
    reach_ratio: float
    y_ratio: float
    height_ratio: float
    offset_ratio: float = 0.5
    follow_offset_ratio: float = 0.5


@dataclass(frozen=True)
class ActionData:
    """Data untuk tiap action yang bisa dimulai dari input"""
    name: str
    state: ActionState
    hitbox: Optional[HitboxShape] = None


ACTION_DATA: Dict[ActionState, ActionData] = {
    ActionState.TAKEDOWN: ActionData(
        name="Takedown",
        state=ActionState.TAKEDOWN,
        # Wide low band catching torso/legs
        hitbox=HitboxShape(reach_ratio=1.2, y_ratio=0.4, height_ratio=0.4,
                           offset_ratio=0.5, follow_offset_ratio=0.3),
    ),
    ActionState.PUNCH: ActionData(
        name="Punch",
        state=ActionState.PUNCH,
        hitbox=HitboxShape(reach_ratio=0.8, y_ratio=0.15, height_ratio=0.2),
    ),
    ActionState.KICK: ActionData(
        name="Kick",
        state=ActionState.KICK,
        hitbox=HitboxShape(reach_ratio=1.0, y_ratio=0.45, height_ratio=0.25),
    ),
    ActionState.BLOCK: ActionData(
        name="Block",
        state=ActionState.BLOCK,
    ),
}

# Input priority: takedown > punch > kick > block
ACTION_PRIORITY = (
    ("takedown", ActionState.TAKEDOWN),
    ("punch", ActionState.PUNCH),
    ("kick", ActionState.KICK),
    ("block", ActionState.BLOCK),
)
