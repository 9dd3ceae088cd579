"""
Static catalog of named point-cloud demos for a UI selector.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, TypedDict, Union

import pandas as pd

from point_clouds import generators as gen
from point_clouds.points import Point
from point_clouds.vectors import InvalidInputError, RandomState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Option:
    """
    A UI-adjustable numeric parameter.

    ``param`` names the generator keyword the option binds to. ``min``/``max``
    are slider bounds only; nothing clamps ``start`` or user values to them.
    """
    name: str
    param: str
    min: float
    max: float
    start: float


@dataclass(frozen=True)
class DemoConfig:
    """A named demo: description, adjustable options and the bound generator."""
    name: str
    description: str
    options: Tuple[Option, ...]
    generator: Callable[..., List[Point]]
    index: int
    accepts_rng: bool = field(default=False, compare=False)

    def defaults(self) -> Dict[str, float]:
        """Option start values keyed by generator parameter."""
        return {opt.param: opt.start for opt in self.options}

    def generate(self, rng: RandomState = None, **params: float) -> List[Point]:
        """
        Run the generator with option starts overridden by ``params``.

        Parameters
        ----------
        rng : None | int | np.random.Generator
            Random source; passed only to randomized generators.
        **params
            Overrides keyed by generator parameter (e.g. ``n``) or by option
            display name.

        Raises
        ------
        InvalidInputError
            If a key matches no option of this demo.
        """
        kwargs = self.defaults()
        by_name = {opt.name: opt.param for opt in self.options}

        for key, value in params.items():
            if key in kwargs:
                kwargs[key] = value
            elif key in by_name:
                kwargs[by_name[key]] = value
            else:
                raise InvalidInputError(f"Demo '{self.name}' has no option '{key}'")

        if self.accepts_rng:
            kwargs['rng'] = rng

        return self.generator(**kwargs)


class DemoRunConfig(TypedDict):
    """Configuration for running a catalog demo."""
    demo: str
    params: Dict[str, float]
    random_state: Optional[int]


def _as_option(opt: Union[Option, Mapping[str, Any]]) -> Option:
    if isinstance(opt, Option):
        return opt
    return Option(**opt)


def _validate_binding(name: str, generator: Callable, options: Sequence[Option]) -> bool:
    """
    Check options against the generator signature.

    Returns whether the generator takes an ``rng`` keyword.
    """
    sig = inspect.signature(generator)
    params = sig.parameters

    bound = [opt.param for opt in options]
    duplicates = {p for p in bound if bound.count(p) > 1}
    if duplicates:
        raise ValueError(f"Demo '{name}' binds parameters more than once: {sorted(duplicates)}")

    unknown = [p for p in bound if p not in params or p == 'rng']
    if unknown:
        raise ValueError(
            f"Demo '{name}' options {unknown} do not match parameters of {generator.__name__}"
        )

    required = [
        p.name for p in params.values()
        if p.default is inspect.Parameter.empty
        and p.kind in (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY)
        and p.name != 'rng'
    ]
    missing = [p for p in required if p not in bound]
    if missing:
        raise ValueError(f"Demo '{name}' leaves required parameters unbound: {missing}")

    return 'rng' in params


def build_catalog(entries: Sequence[Mapping[str, Any]]) -> Tuple[Tuple[DemoConfig, ...], Mapping[str, DemoConfig]]:
    """
    Build the ordered demo registry and its name index.

    Parameters
    ----------
    entries : sequence of dict
        Each with 'name', 'description', 'options' (Option or dict) and
        'generator'.

    Returns
    -------
    demos : tuple[DemoConfig, ...]
        Entries in input order with ``index`` set to their position.
    by_name : Mapping[str, DemoConfig]
        Read-only name lookup.

    Raises
    ------
    ValueError
        On duplicate names or options that do not line up with the
        generator's signature.
    """
    demos = []
    by_name = {}

    for i, entry in enumerate(entries):
        name = entry['name']
        if name in by_name:
            raise ValueError(f"Duplicate demo name: {name}")

        options = tuple(_as_option(o) for o in entry['options'])
        accepts_rng = _validate_binding(name, entry['generator'], options)

        demo = DemoConfig(
            name=name,
            description=entry['description'],
            options=options,
            generator=entry['generator'],
            index=i,
            accepts_rng=accepts_rng
        )
        demos.append(demo)
        by_name[name] = demo

    logger.info(f"Built demo catalog with {len(demos)} entries")

    return tuple(demos), MappingProxyType(by_name)


def _points_option(param: str = 'n', lo: int = 1, hi: int = 100, start: int = 50) -> Option:
    return Option('Number Of Points', param, lo, hi, start)


def _cluster_option() -> Option:
    return Option('Points Per Cluster', 'n', 1, 100, 50)


def _dims_option(hi: int = 100, start: int = 2) -> Option:
    return Option('Dimensions', 'dim', 1, hi, start)


_ENTRIES = [
    {
        'name': 'Grid',
        'description': 'A square grid with equal spacing between points. '
                       'Try convergence at different sizes.',
        'options': [Option('Points Per Side', 'size', 2, 20, 10)],
        'generator': gen.grid_data
    },
    {
        'name': 'Two Clusters',
        'description': 'Two clusters with equal numbers of points.',
        'options': [_cluster_option(), _dims_option()],
        'generator': gen.two_clusters_data
    },
    {
        'name': 'Three Clusters',
        'description': 'Three clusters with equal numbers of points, but at different '
                       'distances from each other. Cluster distances are only apparent '
                       'at certain perplexities.',
        'options': [_cluster_option(), _dims_option()],
        'generator': gen.three_clusters_data
    },
    {
        'name': 'Two Different-Sized Clusters',
        'description': 'Two clusters with equal numbers of points, but different '
                       'variances within the clusters. Cluster separation depends '
                       'on perplexity.',
        'options': [_cluster_option(), _dims_option(), Option('Scale', 'scale', 1, 10, 5)],
        'generator': gen.two_different_clusters_data
    },
    {
        'name': 'Two Long Linear Clusters',
        'description': 'Two sets of points, arranged in parallel lines that are close '
                       'to each other. Note curvature of lines.',
        'options': [_cluster_option()],
        'generator': gen.long_cluster_data
    },
    {
        'name': 'Cluster In Cluster',
        'description': 'A dense, tight cluster inside of a wide, sparse cluster. '
                       'Perplexity makes a big difference here.',
        'options': [_cluster_option(), _dims_option()],
        'generator': gen.subset_clusters_data
    },
    {
        'name': 'Circle (Evenly Spaced)',
        'description': 'Points evenly distributed in a circle. '
                       'Hue corresponds to angle in the circle.',
        'options': [_points_option('num_points')],
        'generator': gen.circle_data
    },
    {
        'name': 'Circle (Randomly Spaced)',
        'description': 'Points randomly distributed in a circle. '
                       'Hue corresponds to angle in the circle.',
        'options': [_points_option('num_points')],
        'generator': gen.random_circle_data
    },
    {
        'name': 'Gaussian Cloud',
        'description': 'Points in a unit Gaussian distribution. Data is entirely random, '
                       'so any visible subclusters are not statistically significant.',
        'options': [_points_option(hi=500), _dims_option()],
        'generator': gen.gaussian_data
    },
    {
        'name': 'Ellipsoidal Gaussian Cloud',
        'description': 'Points in an ellipsoidal Gaussian distribution. '
                       'Dimension n has variance 1/n. Elongation is visible in plot.',
        'options': [_points_option(hi=500), _dims_option()],
        'generator': gen.long_gaussian_data
    },
    {
        'name': 'Trefoil Knot',
        'description': 'Points arranged in 3D, following a trefoil knot. '
                       'Different runs may give different results.',
        'options': [_points_option(hi=200)],
        'generator': gen.trefoil_data
    },
    {
        'name': 'Linked Rings',
        'description': 'Points arranged in 3D, on two linked circles. '
                       'Different runs may give different results.',
        'options': [_points_option(hi=200)],
        'generator': gen.link_data
    },
    {
        'name': 'Unlinked Rings',
        'description': 'Points arranged in 3D, on two unlinked circles.',
        'options': [_points_option(hi=200)],
        'generator': gen.unlink_data
    },
    {
        'name': 'Orthogonal Steps',
        'description': 'Points related by mutually orthogonal steps. '
                       'Very similar to a random walk.',
        'options': [_points_option(hi=500)],
        'generator': gen.ortho_curve
    },
    {
        'name': 'Random Walk',
        'description': 'Random (Gaussian) walk. Smoother than you might think.',
        'options': [
            _points_option(hi=1000, start=100),
            Option('Dimension', 'dim', 1, 1000, 100)
        ],
        'generator': gen.random_walk
    },
    {
        'name': 'Random Jump',
        'description': 'Random (Gaussian) jump.',
        'options': [
            _points_option(hi=1000, start=100),
            Option('Dimension', 'dim', 1, 1000, 100)
        ],
        'generator': gen.random_jump
    },
    {
        'name': 'Equally Spaced',
        'description': 'A set of points, where distances between all pairs of points '
                       'are the same in the original space.',
        'options': [_points_option(lo=2)],
        'generator': gen.simplex_data
    },
    {
        'name': 'Uniform Distribution',
        'description': 'Points uniformly distributed in a unit cube.',
        'options': [_points_option(lo=2, hi=200), _dims_option(hi=10, start=3)],
        'generator': gen.cube_data
    },
]

DEMOS, DEMOS_BY_NAME = build_catalog(_ENTRIES)


def get_demo(name: str) -> DemoConfig:
    """Look up a demo by display name."""
    try:
        return DEMOS_BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown demo '{name}'. Available: {list(DEMOS_BY_NAME)}") from None


def run_demo(cfg: DemoRunConfig) -> List[Point]:
    """
    Generate the points for a configured demo.

    Parameters
    ----------
    cfg : DemoRunConfig
        'demo' is the display name; 'params' overrides option starts;
        'random_state' seeds randomized generators.

    Returns
    -------
    list[Point]
    """
    demo = get_demo(cfg['demo'])
    params = cfg.get('params') or {}
    random_state = cfg.get('random_state')

    points = demo.generate(rng=random_state, **params)

    logger.info(f"Ran demo '{demo.name}' with params {params}, random_state={random_state}: "
                f"{len(points)} points")

    return points


def catalog_frame() -> pd.DataFrame:
    """
    Tabulate the catalog with one row per option.

    Returns
    -------
    pd.DataFrame
        Columns ['index','demo','option','param','min','max','start'].
    """
    rows = [
        {
            'index': demo.index,
            'demo': demo.name,
            'option': opt.name,
            'param': opt.param,
            'min': opt.min,
            'max': opt.max,
            'start': opt.start
        }
        for demo in DEMOS
        for opt in demo.options
    ]
    return pd.DataFrame(rows, columns=['index', 'demo', 'option', 'param', 'min', 'max', 'start'])
