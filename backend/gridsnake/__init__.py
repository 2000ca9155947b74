"""
Grid snake engine.

domain   - value types (Position, Direction, Food, LevelConfig, GameState)
engine   - collision rules, level catalog, food placement, tick transition
players  - optional direction policies for auto-play
main     - headless tick driver and CLI
"""
