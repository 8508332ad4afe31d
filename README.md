# parlab

Small workloads for studying parallel speedup, with helpers that time
them.

- **Mandelbrot** (`parlab.mandelbrot`): a serial renderer and a
  threaded renderer. The threaded renderer shares image rows between
  threads in round-robin order. Both compute in single precision. The
  results can be compared with `first_mismatch` and written as
  greyscale PPM images with `parlab.ppm.write_ppm_image`.
- **Kernels** (`parlab.kernels`): `sqrt_serial` is a Newton's-method
  square root that iterates on `1/sqrt(x)`. `saxpy_serial` computes
  `scale * x + y`. Both work in single precision.
- **k-means** (`parlab.kmeans`, `parlab.kmeans_io`): k-means clustering
  that stops when no cluster's cost changes by more than epsilon. The
  package also reads and writes a binary dataset file and writes text
  logs of a run.
- **Timing** (`parlab.timer`): `current_seconds` reads the clock, and
  `best_time` returns the shortest of several runs.

## Installation

```
pip install .
```

## Commands

```
parlab-mandelbrot --threads 8 --view 2
parlab-sqrt --size 1000000
parlab-saxpy --size 1000000
```

### parlab-mandelbrot

`parlab-mandelbrot` renders a 1600x1200 image with at most 256
iterations. It renders the image serially and again with threads, and
reports the best of five runs for each. It writes
`mandelbrot-serial.ppm` and `mandelbrot-thread.ppm` to the current
directory and prints the speedup. Each worker thread prints a greeting
line. If the two images differ, the command prints the first mismatch
and exits with status 1.

Options:

- `-t` / `--threads N` sets the number of threads. The default is 8 and
  the maximum is 32.
- `-v` / `--view INT` selects the view. View 2 is a zoomed view. View 1
  or lower is the full set. Any higher number is an error.

### parlab-sqrt and parlab-saxpy

`parlab-sqrt` times the Newton square root on random inputs in
[0.001, 2.999]. It reports the best of three runs, then lists every
result that is more than 1e-4 away from `numpy.sqrt`.

`parlab-saxpy` times saxpy with a scale of 2 on `x[i] = y[i] = i`. It
reports the time in ms, the bandwidth in GB/s and the throughput in
GFLOPS.

Both commands take `--size`, the element count. The default is 20
million.

## Library use

```python
from parlab.mandelbrot import View, mandelbrot_thread, mandelbrot_serial, first_mismatch
from parlab.ppm import write_ppm_image

view = View()  # x0=-2, x1=1, y0=-1, y1=1
image = mandelbrot_thread(4, view, 320, 240, 256)
assert first_mismatch(mandelbrot_serial(view, 320, 240, 256), image, 320, 240) is None
write_ppm_image(image, 320, 240, "out.ppm", 256)
```

```python
from parlab.kmeans import k_means
from parlab.kmeans_io import KMeansData, read_data, write_data, log_to_file

dataset = read_data("data.dat")
centroids, assignments = k_means(dataset.data, dataset.centroids, dataset.assignments, dataset.epsilon)
log_to_file("end.log", 0.01, KMeansData(dataset.data, centroids, assignments, dataset.epsilon))
```

`write_data` writes a dataset in the layout that `read_data` reads. The
layout is a little-endian header of M, N, K (32-bit ints) and epsilon
(double), then the points, the centroids and the assignments.

## What is not included

- There is no simulated vector unit and no vectorised
  clamped-exponent or array-sum program.
- There is no k-means command. Clustering, dataset files and logs are
  available only through the library functions above, and the package
  does not generate synthetic datasets.
- The sqrt and saxpy commands time only the serial kernels. They have
  no multi-core variants to compare against.

## Tests

```
pip install .[test]
pytest
```