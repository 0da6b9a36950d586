"""Example: follow the feasible region through a short game of Hotter/Colder."""

from hotcold import RegionTracker, parse_observations, vertices_array

TEXT = """
4
10 0 Hotter
10 10 Colder
5 5 Hotter
5 5 Same
"""


def run():
    tracker = RegionTracker()
    for observation in parse_observations(TEXT):
        step = tracker.observe(observation)
        print(f"{observation.feedback.value:>6} at {tuple(observation.position)} -> {step.formatted}")
        if step.polygon:
            print(vertices_array(step.polygon).round(3))


if __name__ == "__main__":
    run()
