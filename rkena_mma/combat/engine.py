"""
Combat Engine
=============
Resolve hitbox attacker vs hurtbox defender: damage, stamina, state
transitions, block dan clash tie-breaks.
"""

import logging
from typing import Callable, List, Optional

from rkena_mma.config import (
    ActionState, CombatEventType, UNHITTABLE_STATES,
    BalanceConfig, DEFAULT_BALANCE,
)
from rkena_mma.combat.events import CombatEvent, ParticleBurst
from rkena_mma.fighters.fighter import Fighter
from rkena_mma.fighters.hitbox import check_collision

logger = logging.getLogger(__name__)

# Blood burst sizes
TAKEDOWN_BURST = 15
HIT_BURST = 12
BLOCK_BURST = 2


class CombatEngine:
    """
    Engine utama untuk combat resolution.
    resolve() dipanggil dua kali per tick, masing-masing fighter sekali jadi attacker.
    """

    def __init__(self, balance: BalanceConfig = DEFAULT_BALANCE):
        self.balance = balance
        self._listeners: List[Callable[[CombatEvent], None]] = []

    def on_event(self, callback: Callable[[CombatEvent], None]):
        """Register callback untuk setiap combat event (audio, commentary, dll)"""
        self._listeners.append(callback)

    def is_live(self, attacker: Fighter) -> bool:
        """Apakah hitbox attacker sedang di active window"""
        if attacker.hitbox is None:
            return False

        if attacker.state == ActionState.TAKEDOWN:
            return self.balance.in_takedown_window(attacker.state_timer)

        if attacker.state in (ActionState.PUNCH, ActionState.KICK):
            return attacker.state_timer > self.balance.strike_active_min_frames

        return False

    def resolve(self, attacker: Fighter, defender: Fighter) -> Optional[CombatEvent]:
        """
        Cek collision attacker -> defender dan apply hasilnya.
        Return CombatEvent kalau kena, None kalau tidak.
        """
        if attacker.hitbox is None or attacker.is_ko:
            return None

        # Defender yang masih reeling tidak bisa kena lagi
        if defender.state in UNHITTABLE_STATES:
            return None

        if not self.is_live(attacker):
            return None

        if not check_collision(attacker.hitbox, defender.hurtbox):
            return None

        if attacker.state == ActionState.TAKEDOWN:
            event = self._resolve_takedown(attacker, defender)
        else:
            event = self._resolve_strike(attacker, defender)

        # Attack consumed
        attacker.hitbox = None

        if event.damage > 0:
            attacker.hits_landed += 1
            attacker.damage_dealt += event.damage

        logger.debug("%s -> %s: %s (damage %.0f, stamina %.0f)",
                     attacker.name, defender.name, event.type.value,
                     event.damage, event.stamina_damage)

        for listener in self._listeners:
            listener(event)

        return event

    def _resolve_takedown(self, attacker: Fighter, defender: Fighter) -> CombatEvent:
        b = self.balance
        position = (defender.center_x, defender.y + defender.height * 0.8)

        if defender.state == ActionState.TAKEDOWN:
            # Clash - attacker lanjut animasi, defender ke neutral recovery
            attacker.drain_stamina(b.clash_stamina_loss)
            defender.drain_stamina(b.clash_stamina_loss)
            defender.transition(ActionState.IDLE, timer=b.recovery_frames)
            defender.push(b.knockback)
            return CombatEvent(
                type=CombatEventType.CLASH,
                attacker_is_player=attacker.is_player,
                action=ActionState.TAKEDOWN,
                stamina_damage=b.clash_stamina_loss,
                position=position,
            )

        if defender.state == ActionState.BLOCK:
            # Sprawl - takedown gagal, tanpa damage
            attacker.drain_stamina(b.sprawl_attacker_stamina_loss)
            attacker.push(b.knockback)
            defender.drain_stamina(b.sprawl_defender_stamina_loss)
            defender.transition(ActionState.IDLE, timer=b.recovery_frames)
            return CombatEvent(
                type=CombatEventType.SPRAWL,
                attacker_is_player=attacker.is_player,
                action=ActionState.TAKEDOWN,
                stamina_damage=b.sprawl_defender_stamina_loss,
                position=position,
            )

        # Takedown berhasil -> SLAMMED. Timer attacker tidak disentuh.
        defender.take_damage(b.damage_takedown)
        defender.transition(ActionState.SLAMMED, timer=b.slammed_frames)
        return CombatEvent(
            type=CombatEventType.TAKEDOWN,
            attacker_is_player=attacker.is_player,
            action=ActionState.TAKEDOWN,
            damage=b.damage_takedown,
            position=position,
            bursts=[ParticleBurst(position[0], position[1], TAKEDOWN_BURST)],
            shout="TAKEDOWN!",
        )

    def _resolve_strike(self, attacker: Fighter, defender: Fighter) -> CombatEvent:
        b = self.balance
        damage = b.damage_for(attacker.state)
        position = (defender.center_x, defender.y + defender.height * 0.2)

        if defender.state == ActionState.BLOCK:
            stamina_damage = damage * b.block_stamina_mult
            defender.drain_stamina(stamina_damage)
            return CombatEvent(
                type=CombatEventType.BLOCKED,
                attacker_is_player=attacker.is_player,
                action=attacker.state,
                stamina_damage=stamina_damage,
                position=position,
                bursts=[ParticleBurst(position[0], position[1], BLOCK_BURST)],
            )

        defender.take_damage(damage)
        defender.transition(ActionState.HIT, timer=b.hit_stun_frames)
        return CombatEvent(
            type=CombatEventType.HIT,
            attacker_is_player=attacker.is_player,
            action=attacker.state,
            damage=damage,
            position=position,
            bursts=[ParticleBurst(position[0], position[1], HIT_BURST)],
        )
