"""
*motorlimits*: Torque Limits and Losses of PM Synchronous Motor Drives

This package computes the achievable torque range of a voltage-limited,
non-salient PM synchronous motor drive and the electrical power needed to
produce a given torque, including the motor and inverter losses. The
functions are stateless and meant to be called at every step of a
drivetrain simulation.

"""
