'''
tempura - create, use and clean up temporary files and folders
'''

__version__ = '0.1.0'
