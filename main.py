from __future__ import annotations

import hydra
from omegaconf import DictConfig, OmegaConf
from rich import traceback

from disjointset.main import union_find


@hydra.main(version_base=None, config_path="conf", config_name="main")
def main(cfg: DictConfig):
    traceback.install()

    elements = OmegaConf.to_container(cfg["elements"])
    unions = OmegaConf.to_container(cfg["unions"])
    queries = OmegaConf.to_container(cfg["queries"])
    lookups = OmegaConf.to_container(cfg["lookups"])

    assert isinstance(elements, list) and elements, elements
    assert all(len(pair) == 2 for pair in unions), unions
    assert all(len(pair) == 2 for pair in queries), queries

    union_find.main(elements, unions=unions, queries=queries, lookups=lookups)


if __name__ == "__main__":
    main()
