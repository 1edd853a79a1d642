"""Example: run a pulse in a background thread and stop it on Enter."""

import threading

from stickfx import COLORS, BlinkStick


def main():
    """Pulse every LED until the user presses Enter."""

    stop = threading.Event()

    with BlinkStick.open() as stick:

        def run():
            while not stop.is_set():
                stick.pulse_all_leds_color(2.0, 50, COLORS.DIM_BLUE, stop=stop)

        worker = threading.Thread(target=run, daemon=True)
        worker.start()

        input("Pulsing... press Enter to stop\n")
        stop.set()
        worker.join()

    print("Stopped, LEDs are off.")


if __name__ == "__main__":
    main()
