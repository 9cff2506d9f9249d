from minnow import Boat, Voyage, init_logging
from minnow.plotting import SpeedPlotter

init_logging()

# Create boat
boat = Boat(
    name="The Minnow",
    crew=["The Skipper", "Gilligan", "Mary-anne"],
    max_speed=25.0,
)

# Sail through each order
voyage = Voyage(boat)
for state in voyage.run(["full_speed", "full_stop", "half_speed"]):
    print(state["message"])
    print(f"Current speed: {state['speed']:.1f} knots")

for line in boat.roll_call():
    print(line)

print(f"{boat.remove_crew(1)} has left the boat")

for line in boat.roll_call():
    print(line)

print(voyage.to_dataframe())
print(voyage.summary())

plotter = SpeedPlotter(voyage)
plotter.save("minnow_speed.png")
plotter.close()
