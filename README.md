# slimeguard

A small lane-defence game. Five lanes of lawn, thirty elemental slimes
walking in from the right, and a tray of hero cards to place in their way.
Let a slime get past the left edge and the round is lost; once every slime
has been spawned and none is left on the field, it is won.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
slimeguard
slimeguard --seed 42
```

`--seed` fixes the random generator, so spawns and falling sun repeat from
game to game.

The title screen has two buttons: **Start** begins a game, **Rules** shows a
short summary of how to play (click anywhere to go back). Escape returns to
the title screen, and on the title screen closes the window.

In a game:

- Sun is the currency. You start with 500. Sun drops onto the lawn from
  time to time; click it to collect 25. Qiqi produces sun too.
- Click a card in the tray to select it (only if it has cooled down and you
  can afford it), then click a lawn cell to place that hero there. A cell
  that already holds a hero is left alone.
- Click the shovel, then click a hero to dig it up.
- The button at the top right pauses and resumes the game.
- Each lane has a mower. When a slime reaches it, the mower sets off along
  the lane and kills every slime it touches.

### Heroes

| Hero      | Cost | Cooldown (ticks) | Role                                     |
|-----------|------|------------------|------------------------------------------|
| Qiqi      | 50   | 150              | Produces sun                             |
| Venti     | 100  | 227              | Fires wind shots                         |
| Xiangling | 200  | 606              | Explodes, hitting every slime nearby     |
| ZhongLi   | 50   | 606              | Wall with 4000 hit points                |
| Ganyu     | 125  | 227              | Fires ice shots                          |
| Tartaglia | 100  | 227              | Fires water shots                        |
| Klee      | 150  | 227              | Fires fire shots                         |

Shooters only fire while a slime is in their lane.

### Elements

Every slime carries an element: Anemo (wind), Cyro (ice), Electro (thunder),
Grass or Pyro (fire). Shots react with it (`slimeguard.projectiles.react`):

- Fire does double damage to ice slimes, 100 flat damage to grass slimes and
  nothing to fire slimes.
- Water hitting an ice slime, or ice hitting a water-carrying slime, halves
  its speed instead of hurting it; a shot of ice on ice or water on water
  does nothing.
- Water and ice do one and a half times damage to fire slimes.
- Water, ice and fire shots do 75 flat damage to thunder slimes.
- Wind shots, and any shot against a wind slime, add 50 to the damage.
- Grass slimes take plain damage from water, ice and wind.

## Using it as a library

The game logic runs without a window.

```python
import random
from slimeguard.game import Game, Outcome

game = Game(rng=random.Random(1))
game.shop.plant(game.scene, "Venti", 290, 130)
while game.tick() is Outcome.PLAYING:
    pass
print(game.outcome)
```

- `slimeguard.game.Game` builds the field (shop, shovel, lawn, pause button,
  mowers) in a `slimeguard.scene.Scene`. `tick()` advances one step unless
  paused or decided and returns the `Outcome` (`PLAYING`, `LOST`, `WON`).
- `slimeguard.shop.Shop` holds the sun balance and the `Card`s;
  `Shop.plant(scene, name, x, y)` returns the hero planted, or `None`.
- `slimeguard.lawn` has `Lawn.drop`, `Shovel.remove_hero`, `snap_to_cell`,
  `Mower` and `PauseButton`.
- Heroes come from `slimeguard.heroes.create_hero`, slimes from
  `slimeguard.slimes.spawn_slime`, balance values and the card table from
  `slimeguard.config`.

## What it does not do

The window draws the field with plain shapes and text; it loads no images
or animations and plays no music or sound.