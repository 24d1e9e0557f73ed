#!/usr/bin/env python3
"""
Great-Circle Navigation Example using pygreatcircle

This example demonstrates:
1. Distance and bearings between Istanbul Airport and New York JFK
2. Midpoint, intermediate point and destination projection
3. Intersection of two paths and the legacy coincident-point behaviour
4. Cross-track / along-track position of Rome relative to the IST-JFK track
5. A sampled route table and plot
"""

import argparse

from pygreatcircle import GreatCircle, GreatCircleConfig
from pygreatcircle.core import Coordinate
from pygreatcircle.logger import setup_logger
from pygreatcircle.plot import RoutePlot
from pygreatcircle.route import route_summary, route_table, sample_route

IST = Coordinate(41.28111111, 28.75333333)  # Istanbul Airport
JFK = Coordinate(40.63980103, -73.77890015)  # New York JFK Airport
FCO = Coordinate(41.8002778, 12.2388889)     # Roma Fiumicino Airport


def run_demo(output_plot=None, log_level="INFO"):
    """
    Run every great-circle computation on the sample airports

    Parameters
    ----------
    output_plot : str, optional
        Path of a PNG file for the IST-JFK route plot
    log_level : str
        Console log level
    """
    logger = setup_logger("great_circle_demo", level=log_level)
    gc = GreatCircle()

    logger.info(f"Distance IST-JFK: {gc.distance(IST, JFK):,.2f} km")
    logger.info(f"Distance IST-JFK: {gc.distance_in_nm(IST, JFK):,.2f} nm")
    logger.info(f"Initial bearing IST-JFK: {gc.bearing(IST, JFK):.2f} deg")
    logger.info(f"Final bearing IST-JFK: {gc.final_bearing(IST, JFK):.2f} deg")
    logger.info(f"Midpoint IST-JFK: {gc.midpoint(IST, JFK)}")

    fraction = 0.25
    logger.info(f"Point at {fraction} of IST-JFK: {gc.intermediate(IST, JFK, fraction)}")

    west_of_ist = gc.destination(IST, 168.0, 270.0).wrapped()  # approx. 100 nm
    logger.info(f"168 km west of IST: {west_of_ist}")

    crossing = gc.intersection(IST, 270.0, FCO, 45.0)
    if crossing is None:
        logger.info("IST heading 270 and FCO heading 045 do not intersect")
    else:
        logger.info(f"IST heading 270 and FCO heading 045 intersect at {crossing}")

    legacy = GreatCircle(GreatCircleConfig.legacy())
    logger.info(f"Legacy intersection result: {legacy.intersection(IST, 270.0, FCO, 45.0)}")

    logger.info(f"FCO cross-track from IST-JFK: {gc.cross_track_distance(FCO, IST, JFK):,.2f} km")
    logger.info(f"FCO along-track on IST-JFK: {gc.along_track_distance_to(FCO, IST, JFK):,.2f} km")

    peak = gc.max_latitude(IST, gc.bearing(IST, JFK))
    logger.info(f"Maximum latitude on IST-JFK: {peak:.4f} deg")

    lons = gc.crossing_parallels(IST, JFK, 50.0)
    if lons is None:
        logger.info("IST-JFK does not reach 50 deg N")
    else:
        logger.info(f"IST-JFK crosses 50 deg N at longitudes {lons[0]:.4f} and {lons[1]:.4f}")

    track = sample_route(IST, JFK, spacing_km=500.0)
    logger.info(f"Route table:\n{route_table(track).round(3).to_string()}")
    logger.info(f"Route summary: {route_summary(track)}")

    if output_plot:
        plot = RoutePlot()
        plot.set_title("Istanbul - New York great circle")
        plot.add_route(track, label="IST-JFK")
        plot.add_points([IST, FCO, JFK], label="Airports", color="#000000")
        plot.save(output_plot)
        logger.info(f"Route plot written to {output_plot}")


def main():
    parser = argparse.ArgumentParser(description="Great-circle navigation example")
    parser.add_argument("--plot", help="Write the route plot to this PNG file")
    parser.add_argument("--log-level", default="INFO", help="Console log level")
    args = parser.parse_args()
    run_demo(args.plot, args.log_level)


if __name__ == "__main__":
    main()
