"""
Greeting Example - runs the greeting screen with a faster fake network.

Press "Retrieve Data" to read the counter through the view model.
"""

from textual_greeting import GreetingSettings
from textual_greeting.app import GreetingApp


if __name__ == "__main__":
    GreetingApp(settings=GreetingSettings(simulated_delay=0.2)).run()
