import time

import numpy as np

import interactables


def main() -> None:
    server = interactables.run(port=57794)

    note_id = server.register(
        "Note",
        description="A sticky note the agent can edit",
        component="Note",
        props={
            "title": "Groceries",
            "items": ["milk", "eggs"],
            "style": {"color": "yellow", "pinned": False},
        },
    )
    print(server.update_props(note_id, {"title": "Weekend groceries"}))
    print(server.update_props(note_id, {"style": {"color": "green", "pinned": True}}))

    gauge_id = server.register("Gauge", component="Gauge", props={"value": 0.0, "history": []})
    rng = np.random.default_rng(0)
    history: list[float] = []

    try:
        while True:
            value = float(rng.random())
            history = (history + [value])[-10:]
            server.update_props(gauge_id, {"value": value, "history": history})
            time.sleep(1.0)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
