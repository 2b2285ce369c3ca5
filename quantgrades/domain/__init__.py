"""Domain objects: quotes, instruments, execution costs, orders, trades and bar series."""