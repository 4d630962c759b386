"""Radix-2 in-place Fourier, cosine and sine transforms without trigonometric tables.

Every function transforms the mutable sequence *a* in place. The twiddle
arguments (wr, wi) select the direction:

cdft(2*n, cos(pi/n), +/-sin(pi/n), a)
    Complex DFT of n points stored as a[2j] = Re, a[2j+1] = Im.
    With -sin: X[k] = sum x[j] exp(-2 pi i j k / n); with +sin the sign is
    positive. The +sin transform followed by scaling by 1/n inverts the -sin one.
rdft(n, cos(pi/n), +/-sin(pi/n), a)
    Real DFT. With +sin: a[2k] = R[k], a[2k+1] = I[k] (0 < k < n/2),
    a[1] = R[n/2], where R[k] = sum a[j] cos(2 pi j k / n) and
    I[k] = sum a[j] sin(2 pi j k / n). The -sin call followed by scaling by
    2/n inverts it.
ddct(n, cos(pi/n/2), +/-sin(pi/n/2), a)
    With +sin: C[k] = sum a[j] cos(pi j (k + 1/2) / n).
    With -sin: C[k] = sum a[j] cos(pi (j + 1/2) k / n).
ddst(n, cos(pi/n/2), +/-sin(pi/n/2), a)
    With +sin: S[k] = sum_{j=1..n} A[j] sin(pi j (k + 1/2) / n), A[n] in a[0].
    With -sin: S[k] = sum a[j] sin(pi (j + 1/2) k / n), S[n] stored in a[0].
dfct(n, cos(pi/n), sin(pi/n), a)
    C[k] = sum_{j=0..n} a[j] cos(pi j k / n) over n + 1 values.
dfst(n, cos(pi/n), sin(pi/n), a)
    S[k] = sum_{j=1..n-1} a[j] sin(pi j k / n); a[0] is a work area.

Data lengths are powers of two.
"""

from __future__ import annotations

from typing import MutableSequence

Data = MutableSequence[float]


def _bitrv2(n: int, a: Data) -> None:
    """Bit-reversal permutation of n/2 complex values."""
    m = n >> 2
    m2 = m << 1
    n2 = n - 2
    k = 0
    for j in range(0, m2 - 3, 4):
        if j < k:
            a[j], a[j + 1], a[k], a[k + 1] = a[k], a[k + 1], a[j], a[j + 1]
        elif j > k:
            j1 = n2 - j
            k1 = n2 - k
            a[j1], a[j1 + 1], a[k1], a[k1 + 1] = a[k1], a[k1 + 1], a[j1], a[j1 + 1]
        k1 = m2 + k
        a[j + 2], a[j + 3], a[k1], a[k1 + 1] = a[k1], a[k1 + 1], a[j + 2], a[j + 3]
        step = m
        while k >= step:
            k -= step
            step >>= 1
        k += step


def _bitrv(n: int, a: Data) -> None:
    """Bit-reversal permutation of n real values."""
    if n <= 2:
        return
    m = n >> 2
    m2 = m << 1
    n1 = n - 1
    k = 0
    for j in range(0, m2 - 1, 2):
        if j < k:
            a[j], a[k] = a[k], a[j]
        elif j > k:
            a[n1 - j], a[n1 - k] = a[n1 - k], a[n1 - j]
        a[j + 1], a[m2 + k] = a[m2 + k], a[j + 1]
        step = m
        while k >= step:
            k -= step
            step >>= 1
        k += step


def cdft(n: int, wr: float, wi: float, a: Data) -> None:
    """Complex DFT of n/2 complex values interleaved in *a*, in place."""
    m = n
    while m > 4:
        half = m >> 1
        wkr = 1.0
        wki = 0.0
        wdr = 1 - 2 * wi * wi
        wdi = 2 * wi * wr
        ss = 2 * wdi
        wr = wdr
        wi = wdi
        for j in range(0, n - m + 1, m):
            i = j + half
            xr = a[j] - a[i]
            xi = a[j + 1] - a[i + 1]
            a[j] += a[i]
            a[j + 1] += a[i + 1]
            a[i] = xr
            a[i + 1] = xi
            xr = a[j + 2] - a[i + 2]
            xi = a[j + 3] - a[i + 3]
            a[j + 2] += a[i + 2]
            a[j + 3] += a[i + 3]
            a[i + 2] = wdr * xr - wdi * xi
            a[i + 3] = wdr * xi + wdi * xr
        for k in range(4, half - 3, 4):
            wkr -= ss * wdi
            wki += ss * wdr
            wdr -= ss * wki
            wdi += ss * wkr
            for j in range(k, n - m + k + 1, m):
                i = j + half
                xr = a[j] - a[i]
                xi = a[j + 1] - a[i + 1]
                a[j] += a[i]
                a[j + 1] += a[i + 1]
                a[i] = wkr * xr - wki * xi
                a[i + 1] = wkr * xi + wki * xr
                xr = a[j + 2] - a[i + 2]
                xi = a[j + 3] - a[i + 3]
                a[j + 2] += a[i + 2]
                a[j + 3] += a[i + 3]
                a[i + 2] = wdr * xr - wdi * xi
                a[i + 3] = wdr * xi + wdi * xr
        m = half
    if m > 2:
        for j in range(0, n - 3, 4):
            xr = a[j] - a[j + 2]
            xi = a[j + 1] - a[j + 3]
            a[j] += a[j + 2]
            a[j + 1] += a[j + 3]
            a[j + 2] = xr
            a[j + 3] = xi
    if n > 4:
        _bitrv2(n, a)


def rdft(n: int, wr: float, wi: float, a: Data) -> None:
    """Real DFT (wi >= 0) or its unscaled inverse (wi < 0) of n values, in place."""
    if n > 4:
        wkr = 0.0
        wki = 0.0
        wdr = wi * wi
        wdi = wi * wr
        ss = 4 * wdi
        wr = 1 - 2 * wdr
        wi = 2 * wdi
        if wi >= 0:
            cdft(n, wr, wi, a)
            xi = a[0] - a[1]
            a[0] += a[1]
            a[1] = xi
        for k in range((n >> 1) - 4, 3, -4):
            j = n - k
            xr = a[k + 2] - a[j - 2]
            xi = a[k + 3] + a[j - 1]
            yr = wdr * xr - wdi * xi
            yi = wdr * xi + wdi * xr
            a[k + 2] -= yr
            a[k + 3] -= yi
            a[j - 2] += yr
            a[j - 1] -= yi
            wkr += ss * wdi
            wki += ss * (0.5 - wdr)
            xr = a[k] - a[j]
            xi = a[k + 1] + a[j + 1]
            yr = wkr * xr - wki * xi
            yi = wkr * xi + wki * xr
            a[k] -= yr
            a[k + 1] -= yi
            a[j] += yr
            a[j + 1] -= yi
            wdr += ss * wki
            wdi += ss * (0.5 - wkr)
        j = n - 2
        xr = a[2] - a[j]
        xi = a[3] + a[j + 1]
        yr = wdr * xr - wdi * xi
        yi = wdr * xi + wdi * xr
        a[2] -= yr
        a[3] -= yi
        a[j] += yr
        a[j + 1] -= yi
        if wi < 0:
            a[1] = 0.5 * (a[0] - a[1])
            a[0] -= a[1]
            cdft(n, wr, wi, a)
    else:
        if wi < 0:
            a[1] = 0.5 * (a[0] - a[1])
            a[0] -= a[1]
        if n > 2:
            xr = a[0] - a[2]
            xi = a[1] - a[3]
            a[0] += a[2]
            a[1] += a[3]
            a[2] = xr
            a[3] = xi
        if wi >= 0:
            xi = a[0] - a[1]
            a[0] += a[1]
            a[1] = xi


def ddct(n: int, wr: float, wi: float, a: Data) -> None:
    """DCT (wi < 0) or unscaled inverse DCT (wi >= 0) of n values, in place."""
    if n > 2:
        wkr = 0.5
        wki = 0.5
        wdr = 0.5 * (wr - wi)
        wdi = 0.5 * (wr + wi)
        ss = 2 * wi
        if wi < 0:
            xr = a[n - 1]
            for k in range(n - 2, 1, -2):
                a[k + 1] = a[k] - a[k - 1]
                a[k] += a[k - 1]
            a[1] = 2 * xr
            a[0] *= 2
            rdft(n, 1 - ss * wi, ss * wr, a)
            wdr, wdi = wdi, wdr
            ss = -ss
        m = n >> 1
        for k in range(1, m - 2, 2):
            j = n - k
            xr = wdi * a[k] - wdr * a[j]
            a[k] = wdr * a[k] + wdi * a[j]
            a[j] = xr
            wkr -= ss * wdi
            wki += ss * wdr
            xr = wki * a[k + 1] - wkr * a[j - 1]
            a[k + 1] = wkr * a[k + 1] + wki * a[j - 1]
            a[j - 1] = xr
            wdr -= ss * wki
            wdi += ss * wkr
        k = m - 1
        j = n - k
        xr = wdi * a[k] - wdr * a[j]
        a[k] = wdr * a[k] + wdi * a[j]
        a[j] = xr
        a[m] *= wki + ss * wdr
        if wi >= 0:
            rdft(n, 1 - ss * wi, ss * wr, a)
            xr = a[1]
            for k in range(2, n - 1, 2):
                a[k - 1] = a[k] - a[k + 1]
                a[k] += a[k + 1]
            a[n - 1] = xr
    else:
        if wi >= 0:
            xr = 0.5 * (wr + wi) * a[1]
            a[1] = a[0] - xr
            a[0] += xr
        else:
            xr = a[0] - a[1]
            a[0] += a[1]
            a[1] = 0.5 * (wr - wi) * xr


def ddst(n: int, wr: float, wi: float, a: Data) -> None:
    """DST (wi < 0) or unscaled inverse DST (wi >= 0) of n values, in place."""
    if n > 2:
        wkr = 0.5
        wki = 0.5
        wdr = 0.5 * (wr - wi)
        wdi = 0.5 * (wr + wi)
        ss = 2 * wi
        if wi < 0:
            xr = a[n - 1]
            for k in range(n - 2, 1, -2):
                a[k + 1] = a[k] + a[k - 1]
                a[k] -= a[k - 1]
            a[1] = -2 * xr
            a[0] *= 2
            rdft(n, 1 - ss * wi, ss * wr, a)
            wdr, wdi = -wdi, wdr
            wkr = -wkr
        m = n >> 1
        for k in range(1, m - 2, 2):
            j = n - k
            xr = wdi * a[j] - wdr * a[k]
            a[k] = wdr * a[j] + wdi * a[k]
            a[j] = xr
            wkr -= ss * wdi
            wki += ss * wdr
            xr = wki * a[j - 1] - wkr * a[k + 1]
            a[k + 1] = wkr * a[j - 1] + wki * a[k + 1]
            a[j - 1] = xr
            wdr -= ss * wki
            wdi += ss * wkr
        k = m - 1
        j = n - k
        xr = wdi * a[j] - wdr * a[k]
        a[k] = wdr * a[j] + wdi * a[k]
        a[j] = xr
        a[m] *= wki + ss * wdr
        if wi >= 0:
            rdft(n, 1 - ss * wi, ss * wr, a)
            xr = a[1]
            for k in range(2, n - 1, 2):
                a[k - 1] = a[k + 1] - a[k]
                a[k] += a[k + 1]
            a[n - 1] = -xr
    else:
        if wi >= 0:
            xr = 0.5 * (wr + wi) * a[1]
            a[1] = xr - a[0]
            a[0] += xr
        else:
            xr = a[0] + a[1]
            a[0] -= a[1]
            a[1] = 0.5 * (wr - wi) * xr


def dfct(n: int, wr: float, wi: float, a: Data) -> None:
    """Cosine transform of a real symmetric sequence of n + 1 values, in place."""
    m = n >> 1
    for j in range(m):
        k = n - j
        xr = a[j] + a[k]
        a[j] -= a[k]
        a[k] = xr
    an = a[n]
    while m >= 2:
        ddct(m, wr, wi, a)
        xr = 1 - 2 * wi * wi
        wi *= 2 * wr
        wr = xr
        _bitrv(m, a)
        mh = m >> 1
        xi = a[m]
        a[m] = a[0]
        a[0] = an - xi
        an += xi
        for j in range(1, mh):
            k = m - j
            xr = a[m + k]
            xi = a[m + j]
            a[m + j] = a[j]
            a[m + k] = a[k]
            a[j] = xr - xi
            a[k] = xr + xi
        a[mh], a[m + mh] = a[m + mh], a[mh]
        m = mh
    xi = a[1]
    a[1] = a[0]
    a[0] = an + xi
    a[n] = an - xi
    _bitrv(n, a)


def dfst(n: int, wr: float, wi: float, a: Data) -> None:
    """Sine transform of a real anti-symmetric sequence; a[0] is used as work space."""
    m = n >> 1
    for j in range(1, m):
        k = n - j
        xr = a[j] - a[k]
        a[j] += a[k]
        a[k] = xr
    a[0] = a[m]
    while m >= 2:
        ddst(m, wr, wi, a)
        xr = 1 - 2 * wi * wi
        wi *= 2 * wr
        wr = xr
        _bitrv(m, a)
        mh = m >> 1
        for j in range(1, mh):
            k = m - j
            xr = a[m + k]
            xi = a[m + j]
            a[m + j] = a[j]
            a[m + k] = a[k]
            a[j] = xr + xi
            a[k] = xr - xi
        a[m] = a[0]
        a[0] = a[m + mh]
        a[m + mh] = a[mh]
        m = mh
    a[1] = a[0]
    a[0] = 0.0
    _bitrv(n, a)