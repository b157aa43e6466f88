from pyinstrument import Profiler
from seqcontainers import ArraySequence, LinkedSequence


def workload(kind, n):
    seq = kind()
    for i in range(n):
        seq.add(i)
    for i in range(0, n, 50):
        seq.insert(i, -i)
    total = 0
    for i in range(0, seq.size(), 25):
        total += seq.get(i)
    while seq.size() > n // 2:
        seq.remove(seq.size() // 2)
    sub = seq.sub_list(0, seq.size() // 4)
    return total, hash(sub), sub == seq.sub_list(0, seq.size() // 4)


def benchmark_containers():
    profiler = Profiler()
    profiler.start()

    N = 5_000
    print(f"Starting workload (n={N})...")
    for kind in (ArraySequence, LinkedSequence):
        workload(kind, N)
        print(f"{kind.__name__} finished.")

    profiler.stop()

    profiler.print()

    # Optional: save to HTML
    with open("containers_profile.html", "w") as f:
        f.write(profiler.output_html())


if __name__ == "__main__":
    benchmark_containers()
