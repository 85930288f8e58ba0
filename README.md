# ghostescape

A small top-down arcade survival game. You play a ghost drifting through a
starry field three screens wide and three screens tall. Every few seconds a
swarm of hostile spirits fades in around you. They close in on you, and you
survive for as long as you can.

## Installing

```
pip install .
```

The game uses `pygame` for the window, graphics, sound and fonts.

## Playing

Run the game from the directory that holds the `assets/` folder. Images,
sounds, music, fonts and the score file are all looked up relative to it.

```
ghostescape
```

The command prints `GhostEscape running` and opens a 1280×720 window on the
title screen. Apart from `--help`, it takes no options.

The title screen shows the highest score and has three buttons:

- **Start** begins a run.
- **Credits** shows the text of `assets/credits.txt`. Release a mouse button anywhere to close it.
- **Quit** closes the game.

### Controls

| Input              | Action                                                              |
|--------------------|---------------------------------------------------------------------|
| `W` `A` `S` `D`    | Move                                                                |
| Left mouse button  | Cast a thunder strike at the cursor (costs 40 mana, 2 s cooldown)   |
| Right mouse button | Hold to slow time to 40 %                                           |

The three buttons in the top-right corner pause or resume the run, restart
it, and go back to the title screen.

Each ghost you defeat is worth 10 points. A ghost that touches you deals
40 damage, and after every hit you are invincible for 1.5 seconds, blinking
while it lasts. Mana refills at 10 points per second. The health and mana
bars sit in the top-left corner. The lightning icon fills up as the thunder
cooldown recovers.

When your health falls below zero, the ghost dies. A few seconds later the run
freezes and the restart and back buttons appear, enlarged, in the middle of
the screen.

### High score

The high score is kept in `assets/score.dat` as a four-byte little-endian
signed integer. It is written after the player dies, on restart, and when you
return to the title screen. It is read back each time the title screen opens.
A missing or short file counts as 0. `ghostescape.scenes.save_high_score` and
`ghostescape.scenes.load_high_score` read and write this format.

## Using it as a library

The engine underneath is a small object tree:

- `ghostescape.game.Game` is shared through `Game.instance()`. It owns the main loop, the `AssetStore`, the score and high score, audio playback, random helpers and drawing helpers.
- `ghostescape.objects.Object` is the base node. Each frame it adds the children queued with `safe_add_child`, drops the children marked `need_remove`, and updates, renders and cleans the rest.
- `ghostescape.scene.Scene` keeps plain, world and screen children in separate layers. It also owns the camera (`world_to_screen`, `screen_to_world`, `set_camera_position`) and supports `pause` and `resume`.

Scenes are built from these pieces:

- `ghostescape.sprite` provides `Texture`, `Sprite` and `load_texture`.
- `ghostescape.sprite_anim` provides `SpriteAnim`, which steps through a horizontal strip of square frames.
- `ghostescape.collider` provides `Collider` and `ColliderType`.
- `ghostescape.stats` provides `Stats` (health, mana and invincibility).
- `ghostescape.timer` provides `Timer`.
- `ghostescape.hud_button`, `ghostescape.hud_text`, `ghostescape.hud_stats`, `ghostescape.hud_skill` and `ghostescape.ui_mouse` provide the screen widgets.
- `ghostescape.player`, `ghostescape.enemy`, `ghostescape.spawner`, `ghostescape.spell`, `ghostescape.effect` and `ghostescape.weapon_thunder` provide the game pieces.

Most pieces have an `add_..._child(parent, ...)` function. It creates the
piece, initialises it and attaches it to `parent`.

## Limitations

- Only circle colliders are tested for overlap. Two colliders where either one is `ColliderType.RECTANGLE` never collide.
- A missing asset is not replaced with a placeholder. `AssetStore` raises `AssetError` instead, so the game needs its `assets/` folder to run.
- Collider outlines are drawn only when `Collider.debug` is set to true.

## Running the tests

```
pip install .[test]
pytest
```