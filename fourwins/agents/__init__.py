"""Agent implementations for Connect-4."""

from fourwins.agents.alphabeta import AlphaBetaAgent
from fourwins.agents.base import Agent, Decision
from fourwins.agents.minimax import MinimaxAgent
from fourwins.agents.random_agent import RandomAgent

__all__ = ["Agent", "Decision", "RandomAgent", "MinimaxAgent", "AlphaBetaAgent"]
