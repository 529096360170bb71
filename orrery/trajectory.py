import numpy as np
import pandas as pd
from typing import Dict, List, TYPE_CHECKING

if TYPE_CHECKING:
	from .simulation import NBodySimulation

"""
This module records body trajectories at sub-step resolution for analysis and for
display layers that keep their own trail buffers. The TrajectoryRecorder is meant to be
passed as the on_substep callback of NBodySimulation.tick (or called after manual steps);
it appends one row per body per recorded sub-step with the simulation time, the body
name, the position and the velocity, keeping every `every`-th call. to_dataframe collects
the rows into a pandas DataFrame and positions_of returns one body's recorded positions
as an (k, 3) array. Rows live in memory only.


"""


class TrajectoryRecorder:
	COLUMNS = ["time", "name", "x", "y", "z", "vx", "vy", "vz"]

	def __init__(self, every: int = 1) -> None:
		if int(every) < 1:
			print(f"[warning] TrajectoryRecorder every={every} is not positive; recording every sub-step")
			every = 1
		self.every = int(every)
		self._calls = 0
		self.rows: List[Dict[str, float]] = []

	def __call__(self, sim: "NBodySimulation") -> None:
		self.record(sim)

	def record(self, sim: "NBodySimulation") -> None:
		self._calls += 1
		if (self._calls - 1) % self.every != 0:
			return
		t = float(sim.time)
		for snap in sim.snapshot():
			pos = snap["position"]
			vel = snap["velocity"]
			self.rows.append({
				"time": t,
				"name": snap["name"],
				"x": float(pos[0]),
				"y": float(pos[1]),
				"z": float(pos[2]),
				"vx": float(vel[0]),
				"vy": float(vel[1]),
				"vz": float(vel[2]),
			})

	def clear(self) -> None:
		self._calls = 0
		self.rows = []

	def to_dataframe(self) -> pd.DataFrame:
		if not self.rows:
			return pd.DataFrame(columns=self.COLUMNS)
		return pd.DataFrame(self.rows, columns=self.COLUMNS)

	def positions_of(self, name: str) -> np.ndarray:
		df = self.to_dataframe()
		sel = df[df["name"] == name]
		return sel[["x", "y", "z"]].to_numpy(dtype=float)

	def __len__(self) -> int:
		return len(self.rows)
