"""Hello World -- the simplest possible frame loop.

Demonstrates:
- Creating a loop with a fixed frame rate
- Defining a system as a plain function
- Start and stop hooks
- Accessing frame_number, dt, and elapsed from FrameContext

Run: python -m examples.basics
"""

from glide import FrameContext, FrameLoop


# A system is just a function that takes the frame context.
def hello_system(ctx: FrameContext) -> None:
    print(
        f"  frame {ctx.frame_number}  |  dt={ctx.dt:.3f}s  |  elapsed={ctx.elapsed:.3f}s"
    )


def main() -> None:
    print("=== Hello World ===\n")

    # Create a loop running at 10 frames per second.
    loop = FrameLoop(fps=10)

    loop.on_start(lambda ctx: print("  (start)"))
    loop.on_stop(lambda ctx: print("  (stop)"))

    # Register our system. It will be called once per frame.
    loop.add_system(hello_system)

    # Run exactly 5 frames, then stop.
    loop.run(5)

    print(f"\nDone. Loop stopped at frame {loop.frame_number}.")


if __name__ == "__main__":
    main()
