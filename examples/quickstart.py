"""Quickstart: compose a duck, swap its behaviors at runtime.

Run from the repo root:
    python examples/quickstart.py
"""

from mallard import DuckCall, MallardDuck, ModelDuck
from mallard.behaviors import FlyRocketPowered, MuteQuack


def main():
    mallard = MallardDuck("Mallory")
    print(mallard.display())
    print(mallard.perform_quack())
    print(mallard.perform_fly())

    model = ModelDuck("Model")
    print(model.display())
    print(model.perform_fly())
    model.set_fly_behavior(FlyRocketPowered())
    print(model.perform_fly())

    # Silence is a None, not an error
    mallard.set_quack_behavior(MuteQuack())
    print(mallard.perform_quack())

    # A duck call is no duck, but quacks like one
    print(DuckCall().perform_quack())


if __name__ == "__main__":
    main()
