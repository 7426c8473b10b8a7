"""
Step-wise K-means clustering engine.

Composes a distance metric, an initialization policy, hard assignment,
empty-cluster repair, mean updates and a convergence criterion into one
engine that can be advanced one iteration at a time or run to completion.
"""

from typing import Optional, Dict, Set, List, Union, Any
import warnings
import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric, InitializationStrategy, ConvergenceCriterion
from ..base.data_structures import EngineConfig, StepResult, Repair
from ..base.exceptions import IterationCapExceeded
from ..distances import get_metric
from ..initialization import get_init_policy
from ..assignments import HardAssignment, EmptyClusterRepair
from ..updates import MeanUpdater
from ..utils.convergence import ExactCentroidEquality, CentroidTolerance
from ..utils.metrics import inertia
from ..utils.validation import validate_data, check_random_state, parse_device


class ClusterEngine:
    """K-means over a fixed point set, driven one iteration at a time.

    Every call to :meth:`step` runs one full iteration::

        snapshot -> assign -> repair empty clusters -> update centroids
                 -> check convergence -> iteration += 1

    The engine never stops by itself. Callers stop calling :meth:`step`
    once ``converged`` is True or ``iteration`` reaches ``max_iterations``;
    a call past the cap is a flagged no-op. :meth:`run` does the looping for
    callers that do not need the intermediate results.

    Parameters
    ----------
    points : array-like of shape (n_points, n_features)
        The point set. Copied on construction and never modified.
    config : EngineConfig
        Resolved settings; see :class:`EngineConfig`.

    Attributes
    ----------
    history_ : list of StepResult
        Result of every iteration performed since construction or reset
    """

    def __init__(self, points, config: EngineConfig):
        self.config = config
        self.verbose = config.verbose
        self.device = parse_device(config.device)

        self._points = validate_data(points, dtype=config.dtype, device=self.device)
        config.validate(self._points.shape[0])

        self.metric: DistanceMetric = get_metric(config.metric)
        self.initialization_strategy: InitializationStrategy = get_init_policy(config.init_policy)
        self.assignment_strategy = HardAssignment()
        self.repair_strategy = EmptyClusterRepair()
        self.update_strategy = MeanUpdater()
        if config.tol is None:
            self.convergence_criterion: ConvergenceCriterion = ExactCentroidEquality()
        else:
            self.convergence_criterion = CentroidTolerance(atol=config.tol)

        self._generator = check_random_state(config.random_state)

        self._initialize()

    @classmethod
    def create(cls,
               points,
               k: int,
               metric: Union[str, DistanceMetric] = 'euclidean',
               max_iterations: int = 3,
               init_policy: Union[str, InitializationStrategy] = 'first_k',
               **kwargs) -> 'ClusterEngine':
        """Build an engine from keyword settings.

        Extra keyword arguments (``tol``, ``random_state``, ``dtype``,
        ``device``, ``verbose``) are forwarded to :class:`EngineConfig`.

        Raises:
            InvalidConfiguration: If ``k`` is not in ``[1, len(points)]`` or
                any other setting is invalid
        """
        config = EngineConfig(
            k=k,
            metric=metric,
            max_iterations=max_iterations,
            init_policy=init_policy,
            **kwargs
        )
        return cls(points, config)

    def _initialize(self) -> None:
        self._centroids = self.initialization_strategy.initialize(
            self._points, self.config.k, generator=self._generator
        ).to(dtype=self._points.dtype, device=self.device)
        self._previous_centroids: Optional[Tensor] = None
        self._clusters: Dict[int, Set[int]] = {}
        self._iteration = 0
        self._converged = False
        self.convergence_criterion.reset()
        self.history_: List[StepResult] = []

        if self.verbose:
            print(f"Initialized {self.config.k} centroids with "
                  f"{self.initialization_strategy.name or self.initialization_strategy!r} "
                  f"over {self.n_points} points")

    def reset(self) -> None:
        """Start a new run on the same points.

        Centroids are drawn again from the init policy; random policies
        continue from the engine's generator, so they produce a fresh draw.
        """
        self._initialize()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def points(self) -> Tensor:
        return self._points

    @property
    def n_points(self) -> int:
        return self._points.shape[0]

    @property
    def n_clusters(self) -> int:
        return self.config.k

    @property
    def max_iterations(self) -> int:
        return self.config.max_iterations

    @property
    def centroids(self) -> Tensor:
        """Copy of the current (K, d) centroids."""
        return self._centroids.clone()

    @property
    def clusters(self) -> Dict[int, Set[int]]:
        """Copy of the current cluster membership; empty before the first assign."""
        return {k: set(members) for k, members in self._clusters.items()}

    @property
    def iteration(self) -> int:
        return self._iteration

    @property
    def converged(self) -> bool:
        return self._converged

    @property
    def cap_reached(self) -> bool:
        return self._iteration >= self.config.max_iterations

    @property
    def labels_(self) -> Optional[Tensor]:
        """Cluster index per point from the latest assignment."""
        if not self._clusters:
            return None
        return self._result(repairs=[]).labels(self.n_points)

    @property
    def cluster_centers_(self) -> Tensor:
        return self.centroids

    # ------------------------------------------------------------------
    # Iteration phases
    # ------------------------------------------------------------------

    def snapshot_centroids(self) -> Tensor:
        """Record the centroids the next convergence check compares against."""
        self._previous_centroids = self._centroids.clone()
        return self._previous_centroids.clone()

    def assign(self) -> Dict[int, Set[int]]:
        """Rebuild clusters by nearest-centroid assignment.

        Returns:
            Mapping from every centroid index to its member point indices.
            Some clusters may be empty.
        """
        assignments, _ = self.assignment_strategy.compute_assignments(
            self._points, self._centroids, self.metric
        )
        self._clusters = self.assignment_strategy.to_clusters(assignments, self.config.k)
        return self.clusters

    def repair_empty_clusters(self) -> List[Repair]:
        """Give every empty cluster its nearest point from a multi-member cluster.

        Returns:
            List of (point_index, donor_cluster, repaired_cluster) moves

        Raises:
            DegenerateClusteringState: If an empty cluster has no donor
        """
        moves = self.repair_strategy.repair(
            self._points, self._centroids, self._clusters, self.metric
        )

        if self.verbose >= 2:
            for idx, donor, k in moves:
                print(f"  repaired empty cluster {k} with point {idx} "
                      f"from cluster {donor}")

        return moves

    def update_centroids(self) -> None:
        """Move every centroid to the mean of its members, in place.

        Raises:
            DegenerateClusteringState: If any cluster is empty; call
                :meth:`assign` and :meth:`repair_empty_clusters` first
        """
        self.update_strategy.update(self._centroids, self._points, self._clusters)

    def check_convergence(self) -> bool:
        """Compare the centroids with the last snapshot.

        Returns False when no snapshot has been taken yet.
        """
        if self._previous_centroids is None:
            return False

        self._converged = self.convergence_criterion.check({
            'iteration': self._iteration,
            'centroids': self._centroids,
            'previous_centroids': self._previous_centroids
        })
        return self._converged

    # ------------------------------------------------------------------
    # Control surface
    # ------------------------------------------------------------------

    def step(self) -> StepResult:
        """Run one full iteration.

        Returns:
            StepResult for this iteration. Past the iteration cap nothing is
            computed: the result carries ``cap_exceeded=True`` and
            ``converged=False`` and an :class:`IterationCapExceeded` warning
            is emitted.
        """
        if self.cap_reached:
            warnings.warn(
                f"step() called after the iteration cap "
                f"({self.config.max_iterations}) was reached",
                IterationCapExceeded,
                stacklevel=2
            )
            if self.verbose:
                print("Max iterations reached")
            return self._result(repairs=[], converged=False, cap_exceeded=True)

        self.snapshot_centroids()
        self.assign()
        repairs = self.repair_empty_clusters()
        self.update_centroids()
        self.check_convergence()
        self._iteration += 1

        labels = self._result(repairs=[]).labels(self.n_points)
        objective = inertia(self._points, labels, self._centroids, self.metric)
        result = self._result(repairs=repairs, objective=objective)
        self.history_.append(result)

        if self.verbose >= 2:
            sizes = ', '.join(str(s) for s in result.cluster_sizes())
            print(f"Iteration {self._iteration:3d}: inertia = {objective:.6f} "
                  f"sizes = [{sizes}]")

        if self._converged and self.verbose:
            print(f"Converged at iteration {self._iteration}")

        return result

    def run(self) -> StepResult:
        """Step until converged or the iteration cap is reached.

        Returns:
            The last StepResult. If the engine is already converged or at
            the cap, the previous result is returned without stepping again;
            with ``max_iterations == 0`` the flagged no-op result is returned.
        """
        if self._converged or self.cap_reached:
            if self.history_:
                return self.history_[-1]
            return self.step()

        while True:
            result = self.step()
            if result.converged or self.cap_reached:
                break

        if self.verbose and not result.converged:
            warnings.warn(f"Failed to converge after {self.config.max_iterations} iterations")

        return result

    def _result(self, repairs: List[Repair], converged: Optional[bool] = None,
                cap_exceeded: bool = False,
                objective: Optional[float] = None) -> StepResult:
        return StepResult(
            clusters={k: frozenset(members) for k, members in self._clusters.items()},
            centroids=self._centroids.clone(),
            iteration=self._iteration,
            converged=self._converged if converged is None else converged,
            cap_exceeded=cap_exceeded,
            inertia=objective,
            repairs=list(repairs)
        )

    def get_params(self) -> Dict[str, Any]:
        """Configuration of this engine as a plain dictionary."""
        return {
            'k': self.config.k,
            'metric': self.metric,
            'max_iterations': self.config.max_iterations,
            'init_policy': self.initialization_strategy,
            'tol': self.config.tol,
            'random_state': self.config.random_state,
            'dtype': self.config.dtype,
            'device': self.device,
            'verbose': self.verbose
        }

    def __repr__(self) -> str:
        return (f"ClusterEngine(n_points={self.n_points}, k={self.config.k}, "
                f"metric={self.metric!r}, iteration={self._iteration}, "
                f"converged={self._converged})")
